"""Tags of Elastic Beanstalk environments."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_eb_environments(client) -> dict:
    """Return the environment listing of ``client``."""
    try:
        return client.describe_environments()
    except Exception as exc:
        raise ResourceListingError(
            f"Not able to get list of elastic bean stalk environments: {exc}"
        ) from exc


def _environment_tags(client, arn: str) -> dict[str, str]:
    try:
        resource_tags = client.list_tags_for_resource(ResourceArn=arn).get("ResourceTags", [])
    except Exception as exc:
        print("Not able to get elastic bean stalk tags", exc)
        resource_tags = []
    return {pair["Key"]: pair["Value"] for pair in resource_tags}


def parse_eb_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of environment ARNs and the requested tags."""
    environments = get_eb_environments(client).get("Environments", [])
    table = [header_row(tags_to_read, "Arn")]
    table.extend(
        tag_row(tags_to_read, _environment_tags(client, env["EnvironmentArn"]), env["EnvironmentArn"])
        for env in environments
    )
    return table


def tag_eb_environments(csv_data, client) -> int:
    """Tag environments from CSV rows keyed by ARN; stop at the first failure."""
    updated = 0
    for environment_arn, pairs in tag_requests(csv_data):
        additions = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.update_tags_for_resource(ResourceArn=environment_arn, TagsToAdd=additions)
        except Exception as exc:
            report_error(exc)
            return updated
        updated += 1
    return updated
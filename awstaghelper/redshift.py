"""Tags of Redshift clusters."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_redshift_clusters(client) -> list[dict]:
    """Return every Redshift cluster visible to ``client``."""
    try:
        paginator = client.get_paginator("describe_clusters")
        return [
            cluster
            for page in paginator.paginate()
            for cluster in page.get("Clusters", [])
        ]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get redshift instances: {exc}") from exc


def parse_redshift_tags(tags_to_read: str, client, sts_client, region: str) -> list[list[str]]:
    """Return CSV rows of cluster ARNs and the requested tags."""
    clusters = get_redshift_clusters(client)
    try:
        account = sts_client.get_caller_identity()["Account"]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get account id: {exc}") from exc
    rows = [header_row(tags_to_read, "Arn")]
    for cluster in clusters:
        arn = f"arn:aws:redshift:{region}:{account}:cluster:{cluster['ClusterIdentifier']}"
        try:
            resources = client.describe_tags(ResourceName=arn).get("TaggedResources", [])
        except Exception as exc:
            print("Not able to get redshift tags", exc)
            resources = []
        tags = {
            resource["Tag"]["Key"]: resource["Tag"]["Value"] for resource in resources
        }
        rows.append(tag_row(tags_to_read, tags, arn))
    return rows


def tag_redshift(csv_data, client) -> int:
    """Tag clusters from CSV rows keyed by ARN; stop at the first failure."""
    tagged = 0
    for arn, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.create_tags(ResourceName=arn, Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
"""Tags of ECR repositories."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_ecr_repositories(client) -> list[dict]:
    """Return every ECR repository visible to ``client``."""
    try:
        pages = list(client.get_paginator("describe_repositories").paginate())
    except Exception as exc:
        raise ResourceListingError(f"Not able to get ecr repositories: {exc}") from exc
    return [repository for page in pages for repository in page.get("repositories", [])]


def _repository_tags(client, arn: str) -> dict[str, str]:
    try:
        response = client.list_tags_for_resource(resourceArn=arn)
    except Exception as exc:
        print("Not able to get ecr tags", exc)
        return {}
    return {item["Key"]: item["Value"] for item in response.get("tags", [])}


def parse_ecr_repositories_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of repository ARNs and the requested tags."""
    arns = [repository["repositoryArn"] for repository in get_ecr_repositories(client)]
    return [header_row(tags_to_read, "Arn")] + [
        tag_row(tags_to_read, _repository_tags(client, arn), arn) for arn in arns
    ]


def tag_ecr_repo(csv_data, client) -> int:
    """Tag repositories from CSV rows keyed by ARN; stop at the first failure."""
    done = 0
    for repository_arn, pairs in tag_requests(csv_data):
        try:
            client.tag_resource(
                resourceArn=repository_arn,
                tags=[dict(Key=key, Value=value) for key, value in pairs],
            )
        except Exception as exc:
            report_error(exc)
            return done
        done += 1
    return done
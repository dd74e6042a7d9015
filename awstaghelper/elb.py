"""Tags of application and network load balancers."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_elbv2(client) -> list[dict]:
    """Return every application and network load balancer visible to ``client``."""
    paginator = client.get_paginator("describe_load_balancers")
    try:
        return sum((page.get("LoadBalancers", []) for page in paginator.paginate()), [])
    except Exception as exc:
        raise ResourceListingError(f"Not able to get load balancers: {exc}") from exc


def _balancer_tags(client, arn: str) -> dict[str, str]:
    try:
        descriptions = client.describe_tags(ResourceArns=[arn]).get("TagDescriptions", [])
    except Exception as exc:
        print("Not able to get load balancer tags", exc)
        return {}
    return {
        tag["Key"]: tag["Value"]
        for description in descriptions
        for tag in description.get("Tags", [])
    }


def parse_elbv2_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of load balancer ARNs and the requested tags."""
    balancer_arns = [balancer["LoadBalancerArn"] for balancer in get_elbv2(client)]
    return [
        header_row(tags_to_read, "Arn"),
        *(tag_row(tags_to_read, _balancer_tags(client, arn), arn) for arn in balancer_arns),
    ]


def tag_elbv2(csv_data, client) -> int:
    """Tag load balancers from CSV rows keyed by ARN; stop at the first failure."""
    succeeded = 0
    for balancer_arn, pairs in tag_requests(csv_data):
        try:
            client.add_tags(
                ResourceArns=[balancer_arn],
                Tags=[{"Key": label, "Value": content} for label, content in pairs],
            )
        except Exception as exc:
            report_error(exc)
            break
        succeeded += 1
    return succeeded
"""Tags of RDS database instances."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_rds_instances(client) -> list[dict]:
    """Return every database instance visible to ``client``."""
    try:
        paginator = client.get_paginator("describe_db_instances")
        return [
            instance
            for page in paginator.paginate()
            for instance in page.get("DBInstances", [])
        ]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get rds instances: {exc}") from exc


def parse_rds_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of instance ARNs and the requested tags."""
    rows = [header_row(tags_to_read, "Arn")]
    for instance in get_rds_instances(client):
        arn = instance["DBInstanceArn"]
        try:
            items = client.list_tags_for_resource(ResourceName=arn).get("TagList", [])
        except Exception as exc:
            print("Not able to get rds tags", exc)
            items = []
        tags = {tag["Key"]: tag["Value"] for tag in items}
        rows.append(tag_row(tags_to_read, tags, arn))
    return rows


def tag_rds(csv_data, client) -> int:
    """Tag database instances from CSV rows keyed by ARN; stop at the first failure."""
    tagged = 0
    for arn, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.add_tags_to_resource(ResourceName=arn, Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
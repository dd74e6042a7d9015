"""Tags of EBS volumes."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_ebs_volumes(client) -> list[dict]:
    """Return every EBS volume visible to ``client``."""
    try:
        paginator = client.get_paginator("describe_volumes")
        return [
            volume
            for page in paginator.paginate()
            for volume in page.get("Volumes", [])
        ]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get EBS volumes: {exc}") from exc


def parse_ebs_volume_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of volume IDs and the requested tags."""
    rows = [header_row(tags_to_read, "VolumeId")]
    for volume in get_ebs_volumes(client):
        tags = {tag["Key"]: tag["Value"] for tag in volume.get("Tags", [])}
        rows.append(tag_row(tags_to_read, tags, volume["VolumeId"]))
    return rows


def tag_ebs_volumes(csv_data, client) -> int:
    """Tag volumes from CSV rows keyed by volume ID; stop at the first failure."""
    tagged = 0
    for volume_id, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.create_tags(Resources=[volume_id], Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
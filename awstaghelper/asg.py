"""Tags of auto scaling groups."""

from __future__ import annotations

import logging

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row

_log = logging.getLogger(__name__)

_PROPAGATE_MARKER = "|Propagate="
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def get_asgs(client) -> list[dict]:
    """Return every auto scaling group visible to ``client``."""
    try:
        paginator = client.get_paginator("describe_auto_scaling_groups")
        return [
            group
            for page in paginator.paginate()
            for group in page.get("AutoScalingGroups", [])
        ]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get ASGs: {exc}") from exc


def split_propagate(value: str) -> tuple[str, bool]:
    """Split a ``value|Propagate=flag`` cell into the tag value and its flag.

    A cell without the marker, or with an unreadable flag, propagates.
    """
    parts = value.split(_PROPAGATE_MARKER)
    if len(parts) == 1:
        return parts[0], True
    if len(parts) == 2:
        flag = parts[1]
        if flag in _FALSE_WORDS:
            return parts[0], False
        return parts[0], True
    _log.warning("Invalid CSV format: %s", value)
    return parts[0], False


def parse_asg_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of group names and the requested tags with their propagate flags."""
    rows = [header_row(tags_to_read, "AutoScalingGroupName")]
    for group in get_asgs(client):
        tags = {
            tag["Key"]: f"{tag['Value']}{_PROPAGATE_MARKER}"
            + ("true" if tag["PropagateAtLaunch"] else "false")
            for tag in group.get("Tags", [])
        }
        rows.append(tag_row(tags_to_read, tags, group["AutoScalingGroupName"]))
    return rows


def tag_asg(csv_data, client) -> int:
    """Tag groups from CSV rows; stop at the first failure. Return the groups tagged."""
    tagged = 0
    for resource_id, pairs in tag_requests(csv_data):
        tags = []
        for key, cell in pairs:
            value, propagate = split_propagate(cell)
            tags.append(
                {
                    "Key": key,
                    "Value": value,
                    "PropagateAtLaunch": propagate,
                    "ResourceId": resource_id,
                    "ResourceType": "auto-scaling-group",
                }
            )
        try:
            client.create_or_update_tags(Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
"""Tags of EC2 security groups."""

from __future__ import annotations

from .ec2 import _create_tags, _paginate, _tag_map, _tag_rows


def get_security_groups(client) -> list[dict]:
    """Return every security group visible to ``client``."""
    return _paginate(client, "describe_security_groups", "SecurityGroups", "security groups")


def parse_security_group_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of security group IDs and the requested tags."""
    return _tag_rows(
        tags_to_read,
        "Id",
        ((group["GroupId"], _tag_map(group.get("Tags", []))) for group in get_security_groups(client)),
    )


def tag_security_groups(csv_data, client) -> int:
    """Tag security groups from CSV rows keyed by group ID; stop at the first failure."""
    return _create_tags(csv_data, client)
"""Tags of IAM users and roles."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def _list_all(client, operation: str, key: str, what: str) -> list[dict]:
    try:
        paginator = client.get_paginator(operation)
        return [item for page in paginator.paginate() for item in page.get(key, [])]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get IAM {what}: {exc}") from exc


def get_iam_users(client) -> list[dict]:
    """Return every IAM user visible to ``client``."""
    return _list_all(client, "list_users", "Users", "users")


def parse_iam_user_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of user names and the requested tags."""
    rows = [header_row(tags_to_read, "UserName")]
    for user in get_iam_users(client):
        name = user["UserName"]
        try:
            items = client.list_user_tags(UserName=name).get("Tags", [])
        except Exception as exc:
            print("Not able to get IAM user tags", exc)
            items = []
        tags = {tag["Key"]: tag["Value"] for tag in items}
        rows.append(tag_row(tags_to_read, tags, name))
    return rows


def tag_iam_user(csv_data, client) -> int:
    """Tag users from CSV rows keyed by user name; stop at the first failure."""
    tagged = 0
    for name, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.tag_user(UserName=name, Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged


def get_iam_roles(client) -> list[dict]:
    """Return every IAM role visible to ``client``."""
    return _list_all(client, "list_roles", "Roles", "roles")


def parse_iam_roles_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of role names and the requested tags."""
    rows = [header_row(tags_to_read, "RoleName")]
    for role in get_iam_roles(client):
        name = role["RoleName"]
        try:
            items = client.list_role_tags(RoleName=name).get("Tags", [])
        except Exception as exc:
            print("Not able to get iam roles tags", exc)
            items = []
        tags = {tag["Key"]: tag["Value"] for tag in items}
        rows.append(tag_row(tags_to_read, tags, name))
    return rows


def tag_iam_role(csv_data, client) -> int:
    """Tag roles from CSV rows keyed by role name; stop at the first failure."""
    tagged = 0
    for name, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.tag_role(RoleName=name, Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
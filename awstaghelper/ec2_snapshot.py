"""Tags of EBS snapshots owned by the current account."""

from __future__ import annotations

from .ec2 import _account_id, _create_tags, _paginate, _tag_map, _tag_rows


def get_snapshots(account_id: str, client) -> list[dict]:
    """Return every snapshot owned by ``account_id``."""
    return _paginate(
        client, "describe_snapshots", "Snapshots", "snapshots", OwnerIds=[account_id]
    )


def parse_snapshot_tags(tags_to_read: str, client, sts_client) -> list[list[str]]:
    """Return CSV rows of snapshot IDs and the requested tags."""
    snapshots = get_snapshots(_account_id(sts_client), client)
    return _tag_rows(
        tags_to_read,
        "Id",
        ((snap["SnapshotId"], _tag_map(snap.get("Tags", []))) for snap in snapshots),
    )


def tag_snapshot(csv_data, client) -> int:
    """Tag snapshots from CSV rows keyed by snapshot ID; stop at the first failure."""
    return _create_tags(csv_data, client)
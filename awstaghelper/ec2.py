"""Tags of EC2 instances, and the listing and tagging steps other services share."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def _listing(what: str, fetch: Callable[[], object]):
    """Run ``fetch``; turn any failure into a ResourceListingError about ``what``."""
    try:
        return fetch()
    except Exception as exc:
        raise ResourceListingError(f"Not able to get {what}: {exc}") from exc


def _paginate(client, operation: str, key: str, what: str, **params) -> list[dict]:
    """Collect the ``key`` items of every page of a paginated ``operation``."""

    def collect() -> list[dict]:
        pages = client.get_paginator(operation).paginate(**params)
        return [item for page in pages for item in page.get(key, [])]

    return _listing(what, collect)


def _account_id(sts_client) -> str:
    return _listing("account id", lambda: sts_client.get_caller_identity()["Account"])


def _tag_map(items: Iterable[dict]) -> dict[str, str]:
    return {tag["Key"]: tag["Value"] for tag in items}


def _key_values(pairs: Iterable[tuple[str, str]]) -> list[dict[str, str]]:
    return [{"Key": key, "Value": value} for key, value in pairs]


def _lookup_tags(what: str, fetch: Callable[[], dict[str, str]]) -> dict[str, str]:
    """Return the tags ``fetch`` yields, or none after reporting why they are missing."""
    try:
        return fetch()
    except Exception as exc:
        print(f"Not able to get {what}", exc)
        return {}


def _tag_rows(
    tags_to_read: str, id_header: str, resources: Iterable[tuple[str, dict[str, str]]]
) -> list[list[str]]:
    """Build the CSV header and one row per ``(resource id, tags)`` pair."""
    rows = [header_row(tags_to_read, id_header)]
    rows.extend(tag_row(tags_to_read, tags, resource_id) for resource_id, tags in resources)
    return rows


def _apply_tags(csv_data, send: Callable[[str, list[tuple[str, str]]], object]) -> int:
    """Send the tags of each CSV row; stop at the first failure and return how many succeeded."""
    tagged = 0
    for resource_id, pairs in tag_requests(csv_data):
        try:
            send(resource_id, pairs)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged


def _create_tags(csv_data, client) -> int:
    return _apply_tags(
        csv_data,
        lambda resource_id, pairs: client.create_tags(
            Resources=[resource_id], Tags=_key_values(pairs)
        ),
    )


def get_ec2_instances(client) -> list[dict]:
    """Return every instance reservation visible to ``client``."""
    return _paginate(client, "describe_instances", "Reservations", "EC2 instances")


def parse_ec2_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of instance IDs and the requested tags."""
    instances = (
        instance
        for reservation in get_ec2_instances(client)
        for instance in reservation.get("Instances", [])
    )
    return _tag_rows(
        tags_to_read,
        "Id",
        ((instance["InstanceId"], _tag_map(instance.get("Tags", []))) for instance in instances),
    )


def tag_ec2(csv_data, client) -> int:
    """Tag instances from CSV rows keyed by instance ID; stop at the first failure."""
    return _create_tags(csv_data, client)
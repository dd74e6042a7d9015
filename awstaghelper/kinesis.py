"""Tags of Kinesis data streams and Firehose delivery streams."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row

_DELIVERY_STREAM_LIMIT = 10000


def get_firehoses(client) -> dict:
    """Return the delivery stream listing of ``client``."""
    try:
        return client.list_delivery_streams(Limit=_DELIVERY_STREAM_LIMIT)
    except Exception as exc:
        raise ResourceListingError(
            f"Not able to get list of delivery streams: {exc}"
        ) from exc


def parse_firehose_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of delivery stream names and the requested tags."""
    listing = get_firehoses(client)
    rows = [header_row(tags_to_read, "Name")]
    for name in listing.get("DeliveryStreamNames", []):
        try:
            items = client.list_tags_for_delivery_stream(DeliveryStreamName=name).get(
                "Tags", []
            )
        except Exception as exc:
            print("Not able to get kinesis tags", exc)
            items = []
        tags = {tag["Key"]: tag["Value"] for tag in items}
        rows.append(tag_row(tags_to_read, tags, name))
    return rows


def get_streams(client) -> list[str]:
    """Return the name of every data stream visible to ``client``."""
    try:
        paginator = client.get_paginator("list_streams")
        return [
            name for page in paginator.paginate() for name in page.get("StreamNames", [])
        ]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get kinesis streams: {exc}") from exc


def parse_kinesis_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of data stream names and the requested tags."""
    rows = [header_row(tags_to_read, "Name")]
    for name in get_streams(client):
        try:
            items = client.list_tags_for_stream(StreamName=name).get("Tags", [])
        except Exception as exc:
            print("Not able to get kinesis tags", exc)
            items = []
        tags = {tag["Key"]: tag["Value"] for tag in items}
        rows.append(tag_row(tags_to_read, tags, name))
    return rows


def tag_firehose(csv_data, client) -> int:
    """Tag delivery streams from CSV rows keyed by name; stop at the first failure."""
    tagged = 0
    for name, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.tag_delivery_stream(DeliveryStreamName=name, Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged


def tag_kinesis_stream(csv_data, client) -> int:
    """Tag data streams from CSV rows keyed by name; stop at the first failure."""
    tagged = 0
    for name, pairs in tag_requests(csv_data):
        try:
            client.add_tags_to_stream(StreamName=name, Tags=dict(pairs))
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
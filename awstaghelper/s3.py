"""Tags of S3 buckets."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def _error_code(exc: BaseException) -> str | None:
    response = getattr(exc, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code")
    return None


def get_buckets(client) -> dict:
    """Return the bucket listing of ``client``."""
    try:
        return client.list_buckets()
    except Exception as exc:
        raise ResourceListingError(f"Not able to get list of S3 buckets: {exc}") from exc


def parse_s3_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of bucket names and the requested tags."""
    listing = get_buckets(client)
    rows = [header_row(tags_to_read, "Name")]
    for bucket in listing.get("Buckets", []):
        name = bucket["Name"]
        try:
            items = client.get_bucket_tagging(Bucket=name).get("TagSet", [])
        except Exception as exc:
            code = _error_code(exc)
            if code == "NoSuchTagSet":
                print("Tag set for bucket", name, "doesn't exist")
            elif code == "AuthorizationHeaderMalformed":
                print("Bucket", name, "is not in your region")
            else:
                print("Not able to get tags", exc)
            items = []
        tags = {tag["Key"]: tag["Value"] for tag in items}
        rows.append(tag_row(tags_to_read, tags, name))
    return rows


def tag_s3(csv_data, client) -> int:
    """Tag buckets from CSV rows keyed by name; stop at the first failure."""
    tagged = 0
    for name, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.put_bucket_tagging(Bucket=name, Tagging={"TagSet": tags})
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
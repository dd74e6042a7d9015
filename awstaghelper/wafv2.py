"""Tags of WAFv2 web ACLs, regional or CloudFront scoped."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row

_TAG_PAGE_LIMIT = 5


def get_web_acls(scope: str, client) -> dict:
    """Return ``{"WebACLs": [...]}`` with every web ACL of ``scope``, following markers."""
    acls: list[dict] = []
    request: dict = {"Scope": scope}
    while True:
        try:
            result = client.list_web_acls(**request)
        except Exception as exc:
            raise ResourceListingError(f"Not able to get webacls: {exc}") from exc
        acls.extend(result.get("WebACLs", []))
        marker = result.get("NextMarker")
        if not marker:
            break
        request["NextMarker"] = marker
    return {"WebACLs": acls}


def parse_web_acl_tags(tags_to_read: str, scope: str, client) -> list[list[str]]:
    """Return CSV rows of web ACL ARNs and the requested tags.

    Each page of tags of an ACL makes a row of its own.
    """
    rows = [header_row(tags_to_read, "Arn")]
    for acl in get_web_acls(scope, client)["WebACLs"]:
        arn = acl["ARN"]
        marker = None
        while True:
            request = {"ResourceARN": arn, "Limit": _TAG_PAGE_LIMIT}
            if marker:
                request["NextMarker"] = marker
            try:
                response = client.list_tags_for_resource(**request)
            except Exception as exc:
                print("Not able to get webACL tags", exc)
                break
            items = (response.get("TagInfoForResource") or {}).get("TagList", [])
            tags = {tag["Key"]: tag["Value"] for tag in items}
            rows.append(tag_row(tags_to_read, tags, arn))
            marker = response.get("NextMarker")
            if not marker:
                break
    return rows


def tag_web_acl(csv_data, client) -> int:
    """Tag web ACLs from CSV rows keyed by ARN; stop at the first failure."""
    tagged = 0
    for arn, pairs in tag_requests(csv_data):
        tags = [{"Key": key, "Value": value} for key, value in pairs]
        try:
            client.tag_resource(ResourceARN=arn, Tags=tags)
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
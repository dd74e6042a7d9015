"""Tags of Lambda functions."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_lambda_functions(client) -> list[dict]:
    """Return every Lambda function configuration visible to ``client``."""
    try:
        paginator = client.get_paginator("list_functions")
        return [
            function
            for page in paginator.paginate()
            for function in page.get("Functions", [])
        ]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get lambdas: {exc}") from exc


def parse_lambda_function_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of function ARNs and the requested tags."""
    rows = [header_row(tags_to_read, "Arn")]
    for function in get_lambda_functions(client):
        arn = function["FunctionArn"]
        try:
            tags = dict(client.list_tags(Resource=arn).get("Tags", {}))
        except Exception as exc:
            print("Not able to get lambda tags", exc)
            tags = {}
        rows.append(tag_row(tags_to_read, tags, arn))
    return rows


def tag_lambda(csv_data, client) -> int:
    """Tag functions from CSV rows keyed by ARN; stop at the first failure."""
    tagged = 0
    for arn, pairs in tag_requests(csv_data):
        try:
            client.tag_resource(Resource=arn, Tags=dict(pairs))
        except Exception as exc:
            report_error(exc)
            break
        tagged += 1
    return tagged
"""Tags of CloudWatch alarms and log groups."""

from __future__ import annotations

from .ec2 import (
    _account_id,
    _apply_tags,
    _key_values,
    _lookup_tags,
    _paginate,
    _tag_map,
    _tag_rows,
)


def get_cw_alarms(client) -> list[dict]:
    """Return every metric alarm visible to ``client``."""
    return _paginate(client, "describe_alarms", "MetricAlarms", "alarms")


def parse_cw_alarm_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of alarm ARNs and the requested tags."""
    arns = [alarm["AlarmArn"] for alarm in get_cw_alarms(client)]

    def tags_of(arn: str) -> dict[str, str]:
        return _lookup_tags(
            "alarm tags",
            lambda: _tag_map(client.list_tags_for_resource(ResourceARN=arn).get("Tags", [])),
        )

    return _tag_rows(tags_to_read, "Arn", ((arn, tags_of(arn)) for arn in arns))


def get_cw_log_groups(client) -> list[dict]:
    """Return every log group visible to ``client``."""
    return _paginate(client, "describe_log_groups", "logGroups", "log groups")


def parse_cw_log_group_tags(tags_to_read: str, client, sts_client, region: str) -> list[list[str]]:
    """Return CSV rows of log group ARNs and the requested tags."""
    groups = get_cw_log_groups(client)
    account = _account_id(sts_client)
    arns = [f"arn:aws:logs:{region}:{account}:log-group:{g['logGroupName']}" for g in groups]

    def tags_of(arn: str) -> dict[str, str]:
        return _lookup_tags(
            "log group tags",
            lambda: dict(client.list_tags_for_resource(resourceArn=arn).get("tags", {})),
        )

    return _tag_rows(tags_to_read, "Arn", ((arn, tags_of(arn)) for arn in arns))


def tag_cloudwatch_alarm(csv_data, client) -> int:
    """Tag alarms from CSV rows keyed by ARN; stop at the first failure."""
    return _apply_tags(
        csv_data,
        lambda arn, pairs: client.tag_resource(ResourceARN=arn, Tags=_key_values(pairs)),
    )


def tag_cloudwatch_log_groups(csv_data, client) -> int:
    """Tag log groups from CSV rows keyed by ARN; stop at the first failure."""
    return _apply_tags(
        csv_data,
        lambda arn, pairs: client.tag_resource(resourceArn=arn, tags=dict(pairs)),
    )
"""Tags of AWS Config rules."""

from __future__ import annotations

from .ec2 import _apply_tags, _key_values, _listing, _lookup_tags, _tag_map, _tag_rows


def get_config_rules(client) -> dict:
    """Return the config rule listing of ``client``."""
    return _listing("config rules", client.describe_config_rules)


def parse_config_rule_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of config rule ARNs and the requested tags."""
    arns = [rule["ConfigRuleArn"] for rule in get_config_rules(client).get("ConfigRules", [])]

    def tags_of(arn: str) -> dict[str, str]:
        return _lookup_tags(
            "config rule tags",
            lambda: _tag_map(client.list_tags_for_resource(ResourceArn=arn).get("Tags", [])),
        )

    return _tag_rows(tags_to_read, "Arn", ((arn, tags_of(arn)) for arn in arns))


def tag_config_rule(csv_data, client) -> int:
    """Tag config rules from CSV rows keyed by ARN; stop at the first failure."""
    return _apply_tags(
        csv_data,
        lambda arn, pairs: client.tag_resource(ResourceArn=arn, Tags=_key_values(pairs)),
    )
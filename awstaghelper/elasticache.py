"""Tags of ElastiCache clusters."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_elasticache_clusters(client) -> list[dict]:
    """Return every cache cluster visible to ``client``."""
    clusters: list[dict] = []
    try:
        for page in client.get_paginator("describe_cache_clusters").paginate():
            clusters.extend(page.get("CacheClusters", []))
    except Exception as exc:
        raise ResourceListingError(f"Not able to get elasticache instances: {exc}") from exc
    return clusters


def _cluster_tags(client, arn: str) -> dict[str, str]:
    try:
        found = client.list_tags_for_resource(ResourceName=arn)
    except Exception as exc:
        print("Not able to get elasticache tags", exc)
        return {}
    return dict((tag["Key"], tag["Value"]) for tag in found.get("TagList", []))


def parse_elasticache_cluster_tags(tags_to_read: str, client, sts_client, region: str) -> list[list[str]]:
    """Return CSV rows of cluster ARNs and the requested tags."""
    clusters = get_elasticache_clusters(client)
    try:
        account = sts_client.get_caller_identity()["Account"]
    except Exception as exc:
        raise ResourceListingError(f"Not able to get account id: {exc}") from exc
    rows = [header_row(tags_to_read, "Arn")]
    for cluster in clusters:
        cluster_arn = f"arn:aws:elasticache:{region}:{account}:cluster:{cluster['CacheClusterId']}"
        rows.append(tag_row(tags_to_read, _cluster_tags(client, cluster_arn), cluster_arn))
    return rows


def tag_elasticache(csv_data, client) -> int:
    """Tag clusters from CSV rows keyed by ARN; stop at the first failure."""
    applied = 0
    for resource_name, pairs in tag_requests(csv_data):
        try:
            client.add_tags_to_resource(
                ResourceName=resource_name,
                Tags=[{"Key": k, "Value": v} for k, v in pairs],
            )
        except Exception as exc:
            report_error(exc)
            break
        applied += 1
    return applied
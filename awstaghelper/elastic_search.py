"""Tags of Elasticsearch domains."""

from __future__ import annotations

from .errors import ResourceListingError, report_error
from .tabular import header_row, tag_requests, tag_row


def get_elasticsearch_domains(client) -> dict:
    """Return the domain name listing of ``client``."""
    try:
        return client.list_domain_names()
    except Exception as exc:
        raise ResourceListingError(f"Not able to get elasticsearch instances: {exc}") from exc


def _domain_tags(client, arn: str) -> dict[str, str]:
    try:
        tag_list = client.list_tags(ARN=arn).get("TagList", [])
    except Exception as exc:
        print("Not able to get elasticsearch tags", exc)
        tag_list = []
    return {entry["Key"]: entry["Value"] for entry in tag_list}


def parse_elasticsearch_tags(tags_to_read: str, client, sts_client, region: str) -> list[list[str]]:
    """Return CSV rows of domain ARNs and the requested tags."""
    domains = get_elasticsearch_domains(client).get("DomainNames", [])
    try:
        identity = sts_client.get_caller_identity()
    except Exception as exc:
        raise ResourceListingError(f"Not able to get account id: {exc}") from exc
    prefix = f"arn:aws:es:{region}:{identity['Account']}:domain/"
    domain_arns = [prefix + domain["DomainName"] for domain in domains]
    return [header_row(tags_to_read, "Arn")] + [
        tag_row(tags_to_read, _domain_tags(client, arn), arn) for arn in domain_arns
    ]


def tag_elasticsearch(csv_data, client) -> int:
    """Tag domains from CSV rows keyed by ARN; stop at the first failure."""
    count = 0
    for domain_arn, pairs in tag_requests(csv_data):
        tag_list = [{"Key": name, "Value": text} for name, text in pairs]
        try:
            client.add_tags(ARN=domain_arn, TagList=tag_list)
        except Exception as exc:
            report_error(exc)
            break
        count += 1
    return count
"""Tags of CloudFront distributions."""

from __future__ import annotations

from .ec2 import _apply_tags, _key_values, _listing, _lookup_tags, _tag_map, _tag_rows


def get_distributions(client) -> dict:
    """Return the distribution listing of ``client``."""
    return _listing("distributions", client.list_distributions)


def parse_distributions_tags(tags_to_read: str, client) -> list[list[str]]:
    """Return CSV rows of distribution ARNs and the requested tags."""
    listing = get_distributions(client)
    arns = [item["ARN"] for item in (listing.get("DistributionList") or {}).get("Items", [])]

    def tags_of(arn: str) -> dict[str, str]:
        def fetch() -> dict[str, str]:
            response = client.list_tags_for_resource(Resource=arn)
            return _tag_map((response.get("Tags") or {}).get("Items", []))

        return _lookup_tags("distributions tags", fetch)

    return _tag_rows(tags_to_read, "Arn", ((arn, tags_of(arn)) for arn in arns))


def tag_distribution(csv_data, client) -> int:
    """Tag distributions from CSV rows keyed by ARN; stop at the first failure."""
    return _apply_tags(
        csv_data,
        lambda arn, pairs: client.tag_resource(
            Resource=arn, Tags={"Items": _key_values(pairs)}
        ),
    )
"""Validate domains.json structure."""

from dataclasses import dataclass, field

from nameclutch.pitch.data import is_pitch_mapping

REQUIRED_FIELDS = {"id", "name", "price", "tld", "category"}


@dataclass
class ValidationResult:
    """Result of a catalog validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_listings: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Catalog Validation: {self.total_listings} listings checked"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed:
            lines.append("PASSED")
        else:
            lines.append("FAILED")
        return "\n".join(lines)


def validate_catalog(catalog: dict) -> ValidationResult:
    """Run all validation checks on a loaded catalog.

    Args:
        catalog: Loaded catalog dict.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult()

    domains = catalog.get("domains")
    if not isinstance(domains, list):
        result.errors.append("Catalog has no 'domains' list")
        return result

    seen_ids: set[int] = set()
    for index, entry in enumerate(domains):
        result.total_listings += 1
        if not isinstance(entry, dict):
            result.errors.append(f"[{index}]: entry is not an object")
            continue

        label = entry.get("name") or f"[{index}]"

        missing = REQUIRED_FIELDS - set(entry.keys())
        if missing:
            result.errors.append(f"{label}: missing fields {sorted(missing)}")

        listing_id = entry.get("id")
        if "id" in entry:
            if isinstance(listing_id, bool) or not isinstance(listing_id, int):
                result.errors.append(f"{label}: id must be an integer, got {listing_id!r}")
            elif listing_id in seen_ids:
                result.errors.append(f"{label}: duplicate id {listing_id}")
            else:
                seen_ids.add(listing_id)

        name = entry.get("name")
        if "name" in entry:
            if not isinstance(name, str) or "." not in name:
                result.errors.append(f"{label}: name must be a dotted domain, got {name!r}")
            else:
                tld = entry.get("tld")
                if isinstance(tld, str) and tld and not name.lower().endswith(tld.lower()):
                    result.warnings.append(f"{label}: tld '{tld}' does not match the name")

        if "featured" in entry and not isinstance(entry["featured"], bool):
            result.warnings.append(f"{label}: featured should be true/false")

        pitch = entry.get("pitch")
        if pitch is not None and not is_pitch_mapping(pitch):
            result.errors.append(f"{label}: authored pitch is incomplete")

    return result

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from models.contractor.contractor import Contractor


def build_color_map(
    contractors: Iterable["Contractor"],
    overrides: dict[str, str] | None = None
) -> dict[str, str]:
    """Occupant label -> colour from the contractor registry, with per-request overrides on top."""
    color_map = {contractor.name: contractor.color for contractor in contractors}
    color_map.update(overrides or {})
    return color_map

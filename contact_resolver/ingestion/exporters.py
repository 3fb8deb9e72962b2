"""Export utilities for resolved business contact records."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, MutableMapping, Optional, Sequence, Union

import pandas as pd

from ..models import BusinessContactState
from ..quality import contact_confidence, validate_for_export

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]

EXPORT_COLUMNS = (
    "source_id",
    "business_name",
    "website_url",
    "domain",
    "owner_first_name",
    "owner_last_name",
    "greeting_name",
    "name_source",
    "email",
    "email_source",
    "email_verification_status",
    "email_verified",
    "owners",
    "confidence",
    "exportable",
    "export_errors",
)


def export_businesses(
    businesses: Sequence[BusinessContactState],
    path: PathLike,
    *,
    only_exportable: bool = False,
    allow_risky: bool = False,
    sheet_name: str = "Contacts",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write resolved records to a CSV or Excel file.

    With ``only_exportable`` set, records failing :func:`validate_for_export`
    are left out of the file (they are never removed from ``businesses``).
    """

    dataframe = businesses_to_dataframe(businesses, allow_risky=allow_risky)
    if only_exportable and not dataframe.empty:
        skipped = int((~dataframe["exportable"]).sum())
        if skipped:
            LOGGER.info("Leaving %s of %s records out of the export", skipped, len(dataframe))
        dataframe = dataframe[dataframe["exportable"]]
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _write_dataframe(dataframe, output_path, sheet_name=sheet_name, exporter_kwargs=exporter_kwargs)
    return output_path


def businesses_to_dataframe(
    businesses: Sequence[BusinessContactState],
    *,
    allow_risky: bool = False,
) -> pd.DataFrame:
    """Convert records into a :class:`pandas.DataFrame` with one row per business."""

    records = [_business_to_row(business, allow_risky=allow_risky) for business in businesses]
    return pd.DataFrame(records, columns=list(EXPORT_COLUMNS))


def _business_to_row(business: BusinessContactState, *, allow_risky: bool) -> MutableMapping[str, object]:
    check = validate_for_export(business, allow_risky=allow_risky)
    return {
        "source_id": business.source_id,
        "business_name": business.business_name,
        "website_url": business.website_url,
        "domain": business.domain,
        "owner_first_name": business.owner_first_name,
        "owner_last_name": business.owner_last_name,
        "greeting_name": business.greeting_name,
        "name_source": business.name_source.value,
        "email": business.email,
        "email_source": business.email_source.value,
        "email_verification_status": business.email_verification_status.value,
        "email_verified": bool(business.email_verified),
        "owners": _format_owners(business),
        "confidence": contact_confidence(business),
        "exportable": check.valid,
        "export_errors": "; ".join(check.errors),
    }


def _format_owners(business: BusinessContactState) -> str:
    parts: List[str] = []
    for owner in business.owners:
        text = owner.full_name or " ".join(filter(None, [owner.first_name, owner.last_name]))
        annotations = [value for value in (owner.title, owner.email) if value]
        if annotations:
            text = f"{text} ({', '.join(annotations)})"
        parts.append(text)
    return "; ".join(parts)


def _write_dataframe(
    dataframe: pd.DataFrame,
    path: Path,
    *,
    sheet_name: str,
    exporter_kwargs: Optional[MutableMapping[str, object]],
) -> None:
    exporter_kwargs = dict(exporter_kwargs or {})
    suffix = path.suffix.lower()

    if suffix in {".csv", ".tsv"}:
        if suffix == ".tsv":
            exporter_kwargs.setdefault("sep", "\t")
        dataframe.to_csv(path, index=False, **exporter_kwargs)
        return

    if suffix in {".xlsx", ".xlsm"}:
        engine = exporter_kwargs.pop("engine", None) or "openpyxl"
        dataframe.to_excel(path, index=False, sheet_name=sheet_name, engine=engine, **exporter_kwargs)
        return

    raise ValueError(f"Unsupported export file extension: {suffix}")


__all__ = ["EXPORT_COLUMNS", "businesses_to_dataframe", "export_businesses"]

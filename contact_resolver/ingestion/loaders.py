"""Utilities for loading business records from spreadsheets."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, MutableMapping, Optional, Sequence, Type, TypeVar, Union

import pandas as pd

from ..emails.verification import mark_published
from ..models import BusinessContactState, EmailSource, NameSource, VerificationStatus

LOGGER = logging.getLogger(__name__)

# addresses read from the business's own site need no verifier call
_PUBLISHED_SOURCES = frozenset({EmailSource.WEBSITE_SCRAPE, EmailSource.LLM})

PathLike = Union[str, Path]
EnumT = TypeVar("EnumT")

_FIELD_SYNONYMS: Mapping[str, Sequence[str]] = {
    "source_id": ("source_id", "id", "business_id", "record_id", "place_id"),
    "business_name": ("business_name", "business", "company", "name", "title"),
    "website_url": ("website_url", "website", "url", "site"),
    "domain": ("domain",),
    "owner_first_name": ("owner_first_name", "first_name", "firstname"),
    "owner_last_name": ("owner_last_name", "last_name", "lastname", "surname"),
    "email": ("email", "owner_email", "email_address"),
    "name_source": ("name_source",),
    "email_source": ("email_source",),
    "email_verification_status": ("email_verification_status", "verification_status"),
}


class UnsupportedFileTypeError(ValueError):
    """Raised when an unsupported file format is passed to the loader."""


def load_businesses(
    path: PathLike,
    *,
    column_mapping: Optional[Mapping[str, str]] = None,
    sheet_name: Union[str, int, None] = 0,
    loader_kwargs: Optional[MutableMapping[str, Any]] = None,
) -> List[BusinessContactState]:
    """Load business records from a spreadsheet.

    Parameters
    ----------
    path:
        Path to the CSV/TSV/XLSX file to be loaded.
    column_mapping:
        Optional mapping of :class:`BusinessContactState` field names to column
        names. Unmapped fields are matched against common column names.
    sheet_name:
        Sheet selector passed to :func:`pandas.read_excel` when loading an Excel
        file. Ignored for CSV files.
    loader_kwargs:
        Extra keyword arguments forwarded to :func:`pandas.read_csv` or
        :func:`pandas.read_excel`.

    Columns written by :func:`~contact_resolver.ingestion.exporters.export_businesses`
    are read back, so a previous run's output can be fed in again.
    """

    dataframe = _read_dataframe(path, sheet_name=sheet_name, loader_kwargs=loader_kwargs)
    mapping = dict(column_mapping or {})
    businesses: List[BusinessContactState] = []

    for index, row in dataframe.iterrows():
        if _row_is_empty(row):
            continue
        business = _row_to_business(row, dataframe.columns, mapping)
        if not business.business_name and not business.website_url:
            LOGGER.debug("Skipping row %s without a business name or website", index)
            continue
        businesses.append(business)

    return businesses


def _read_dataframe(
    path: PathLike,
    *,
    sheet_name: Union[str, int, None] = 0,
    loader_kwargs: Optional[MutableMapping[str, Any]] = None,
) -> pd.DataFrame:
    loader_kwargs = dict(loader_kwargs or {})
    path_obj = Path(path)
    suffix = path_obj.suffix.lower()

    if suffix in {".csv", ".tsv"}:
        if suffix == ".tsv":
            loader_kwargs.setdefault("sep", "\t")
        loader_kwargs.setdefault("dtype", str)
        return pd.read_csv(path_obj, **loader_kwargs)

    if suffix in {".xls", ".xlsx", ".xlsm"}:
        engine = loader_kwargs.pop("engine", None) or "openpyxl"
        loader_kwargs.setdefault("dtype", str)
        return pd.read_excel(path_obj, sheet_name=sheet_name, engine=engine, **loader_kwargs)

    raise UnsupportedFileTypeError(f"Unsupported file extension: {path_obj.suffix}")


def _row_is_empty(row: pd.Series) -> bool:
    return all(pd.isna(value) or (isinstance(value, str) and not value.strip()) for value in row.values)


def _row_to_business(row: pd.Series, columns: Iterable[str], mapping: Mapping[str, str]) -> BusinessContactState:
    values = {
        field: _extract_scalar(row, _resolve_columns(field, columns, mapping))
        for field in _FIELD_SYNONYMS
    }

    email_status = _parse_enum(VerificationStatus, values["email_verification_status"], VerificationStatus.UNCHECKED)
    email = values["email"]
    business = BusinessContactState(
        business_name=values["business_name"] or "",
        website_url=values["website_url"],
        domain=(values["domain"] or "").lower() or None,
        owner_first_name=values["owner_first_name"],
        owner_last_name=values["owner_last_name"],
        name_source=_parse_enum(NameSource, values["name_source"], NameSource.NONE),
        email=email.lower() if email else None,
        email_source=_parse_enum(EmailSource, values["email_source"], EmailSource.NONE),
        email_verified=(email_status is VerificationStatus.VALID) if email else None,
        email_verification_status=email_status,
        source_id=values["source_id"],
    )
    if (
        business.email
        and business.email_source in _PUBLISHED_SOURCES
        and business.email_verification_status is VerificationStatus.UNCHECKED
    ):
        mark_published(business)
    return business


def _parse_enum(enum_cls: Type[EnumT], value: Optional[str], default: EnumT) -> EnumT:
    if not value:
        return default
    try:
        return enum_cls(value.strip().lower())  # type: ignore[call-arg]
    except ValueError:
        LOGGER.warning("Ignoring unknown %s value %r", enum_cls.__name__, value)
        return default


def _resolve_columns(field: str, available_columns: Iterable[str], mapping: Mapping[str, str]) -> List[str]:
    if field in mapping:
        return [mapping[field]]

    synonyms = tuple(name.lower() for name in _FIELD_SYNONYMS.get(field, (field,)))
    resolved: List[str] = []

    # exact matches first so "email" is not shadowed by "email_source"
    for synonym in synonyms:
        for column in available_columns:
            normalised = str(column).strip().lower().replace(" ", "_")
            if normalised == synonym and column not in resolved:
                resolved.append(column)

    return resolved


def _extract_scalar(row: pd.Series, columns: Sequence[str]) -> Optional[str]:
    for column in columns:
        if column not in row:
            continue
        text = _clean_text(row[column])
        if text is not None:
            return text
    return None


def _clean_text(value: Any) -> Optional[str]:
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


__all__ = ["load_businesses", "UnsupportedFileTypeError"]

"""Dataset loader: registros etiquetados → muestras de telemetría tipadas.

Política de tolerancia: ningún registro se descarta y nunca se lanza
excepción al normalizar. Un campo ausente o no numérico se degrada a 0.0
(o a ``"undefined"`` para el timestamp) y los componentes aguas abajo
deben tolerar esas muestras degeneradas.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, List, Tuple

import pandas as pd

from ..common.errors import ArchiveLoadError
from .domain.telemetry import FIELD_LABELS, NUMERIC_FIELDS, TelemetrySample
from .numeric import safe_float

logger = logging.getLogger(__name__)

MISSING_TIMESTAMP = "undefined"


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def _coerce_time(value: Any) -> str:
    if _is_missing(value):
        return MISSING_TIMESTAMP
    # pandas promueve a float una columna entera con huecos: 1700000000 -> 1700000000.0
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _normalize(record: Any) -> Tuple[TelemetrySample, int]:
    """Normaliza un registro y devuelve (muestra, nº de campos degradados)."""
    if not isinstance(record, Mapping):
        record = {}

    degraded = 0
    raw_time = record.get(FIELD_LABELS["time"])
    if _is_missing(raw_time):
        degraded += 1

    values = {}
    for attr in NUMERIC_FIELDS:
        coerced = safe_float(record.get(FIELD_LABELS[attr]), None)
        if coerced is None:
            degraded += 1
            coerced = 0.0
        values[attr] = coerced

    return TelemetrySample(time=_coerce_time(raw_time), **values), degraded


def normalize_record(record: Any) -> TelemetrySample:
    """Convierte un registro crudo (etiqueta → valor) en una muestra."""
    sample, _ = _normalize(record)
    return sample


def normalize_records(records: Iterable[Any]) -> List[TelemetrySample]:
    """Normaliza una secuencia de registros preservando el orden de entrada."""
    samples: List[TelemetrySample] = []
    degraded_total = 0
    degraded_records = 0

    for idx, record in enumerate(records or ()):
        sample, degraded = _normalize(record)
        if degraded:
            degraded_total += degraded
            degraded_records += 1
            logger.debug("[LOADER] Record %d degraded (%d fields)", idx, degraded)
        samples.append(sample)

    if degraded_records:
        logger.warning(
            "[LOADER] %d/%d records had missing or non-numeric fields (%d fields coerced)",
            degraded_records, len(samples), degraded_total,
        )
    return samples


def read_archive_file(path: str | Path) -> List[dict]:
    """Lee el archivo de telemetría y devuelve los registros crudos en orden.

    Soporta ``.json`` (array de objetos) y ``.csv`` (con cabecera). Los
    valores se leen sin inferencia de tipos ni fechas; la coerción la
    hace ``normalize_records``.

    Raises:
        ArchiveLoadError: si el archivo no existe o no se puede parsear.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ArchiveLoadError(str(path), "file not found")

    suffix = file_path.suffix.lower()
    try:
        if suffix == ".csv":
            df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        elif suffix == ".json":
            df = pd.read_json(
                file_path,
                orient="records",
                dtype=False,
                convert_dates=False,
                keep_default_dates=False,
            )
        else:
            raise ArchiveLoadError(str(path), f"unsupported format {suffix!r}")
    except ArchiveLoadError:
        raise
    except (ValueError, OSError) as e:
        raise ArchiveLoadError(str(path), str(e)) from e

    records = df.to_dict(orient="records")
    logger.info("[LOADER] Read %d records from %s", len(records), file_path)
    return records


def load_archive(path: str | Path) -> List[TelemetrySample]:
    """Lee y normaliza el archivo completo (TelemetryArchive)."""
    return normalize_records(read_archive_file(path))

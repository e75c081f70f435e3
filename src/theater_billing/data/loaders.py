"""
Data loaders - build the PlayCatalog and Invoices from files.

Supported play catalogs:
- plays.json: {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}
- plays.csv / plays.xlsx (sheet "Plays"): columns play_id, name, type

Invoices come from a JSON list:
    [{"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 55}]}]
"""
import json
from pathlib import Path

import pandas as pd

from ..engine.catalog import PlayCatalog
from ..engine.models import Invoice, Performance, Play
from .schemas import InvoiceRecord, PlayRecord


PLAY_COLUMNS = ['play_id', 'name', 'type']


def _read_json(path: Path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _play_record(play_id: str, entry) -> PlayRecord:
    if not isinstance(entry, dict):
        raise ValueError(f"Play {play_id!r} must be an object with name and type")
    return PlayRecord.model_validate({**entry, 'play_id': play_id})


def _read_table(path: Path) -> pd.DataFrame:
    """Read a CSV or Excel play table with stripped string columns."""
    if path.suffix.lower() == '.csv':
        df = pd.read_csv(path, dtype=str)
    else:
        df = pd.read_excel(path, sheet_name='Plays', dtype=str)

    df = df.fillna('')
    df.columns = [str(c).strip() for c in df.columns]
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    missing = [c for c in PLAY_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing column(s): {', '.join(missing)}")

    duplicated = df.loc[df['play_id'].duplicated(), 'play_id'].unique()
    if len(duplicated) > 0:
        raise ValueError(f"Duplicate play ids in {path.name}: {', '.join(duplicated)}")

    return df


def load_plays(path: Path, verbose: bool = False) -> PlayCatalog:
    """
    Load the play catalog from a .json, .csv or .xlsx file.

    Args:
        path: Catalog file
        verbose: Print progress messages

    Returns:
        PlayCatalog keyed by play id
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Play catalog not found at {path}.")

    suffix = path.suffix.lower()
    if suffix == '.json':
        raw = _read_json(path)
        if not isinstance(raw, dict):
            raise ValueError(f"{path.name} must map play ids to plays")
        records = [_play_record(play_id, entry) for play_id, entry in raw.items()]
    elif suffix in ('.csv', '.xlsx'):
        df = _read_table(path)
        records = [
            PlayRecord(play_id=row['play_id'], name=row['name'], type=row['type'])
            for row in df.to_dict(orient='records')
        ]
    else:
        raise ValueError(f"Unsupported play catalog format: {path.suffix}")

    catalog = PlayCatalog({
        record.play_id: Play(name=record.name, type=record.type)
        for record in records
    })

    if verbose:
        print(f"Loaded {len(catalog)} plays from {path}")

    return catalog


def load_invoices(path: Path, verbose: bool = False) -> list[Invoice]:
    """
    Load invoices from a JSON file.

    Args:
        path: Invoices file (JSON list)
        verbose: Print progress messages

    Returns:
        Invoices in file order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Invoices file not found at {path}.")

    raw = _read_json(path)
    if not isinstance(raw, list):
        raise ValueError(f"{path.name} must contain a list of invoices")

    invoices = []
    for entry in raw:
        record = InvoiceRecord.model_validate(entry)
        invoices.append(Invoice(
            customer=record.customer,
            performances=tuple(
                Performance(play_id=p.play_id, audience=p.audience)
                for p in record.performances
            ),
        ))

    if verbose:
        total = sum(len(inv.performances) for inv in invoices)
        print(f"Loaded {len(invoices)} invoices ({total} performances) from {path}")

    return invoices

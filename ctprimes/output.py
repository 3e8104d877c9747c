"""
Serialize prime tables.

Formats:
- text: space separated, one line
- json: a JSON list
- csv:  one column `prime`, written with pandas
- c:    a C header with a static const array
- npy:  numpy binary (needs a file path)
"""

import json
from pathlib import Path

import numpy as np
import pandas as pd

FORMATS = ('text', 'json', 'csv', 'c', 'npy')

# numpy dtype name -> C fixed-width type
_C_TYPES = {
    'int8': 'int8_t',
    'int16': 'int16_t',
    'int32': 'int32_t',
    'int64': 'int64_t',
    'uint8': 'uint8_t',
    'uint16': 'uint16_t',
    'uint32': 'uint32_t',
    'uint64': 'uint64_t',
}


def is_c_identifier(name: str) -> bool:
    """ASCII letters, digits and underscores, not starting with a digit."""
    return name.isascii() and name.isidentifier()


def to_text(table: np.ndarray) -> str:
    return ' '.join(str(p) for p in table.tolist()) + '\n'


def to_json(table: np.ndarray) -> str:
    return json.dumps(table.tolist()) + '\n'


def to_csv(table: np.ndarray) -> str:
    return pd.DataFrame({'prime': table}).to_csv(index=False)


def to_c_header(table: np.ndarray, name: str = 'PRIMES') -> str:
    """
    Render a C header holding the table.

    The header defines NAME_SIZE, a NAME_t element typedef matching the numpy
    dtype, and a static const array NAME.
    """
    if not is_c_identifier(name):
        raise ValueError(f"{name!r} is not a valid C identifier")
    name = name.upper()
    c_type = _C_TYPES[table.dtype.name]
    lines = [
        f'#ifndef {name}_H',
        f'#define {name}_H',
        '',
        '#include <stdint.h>',
        '',
        f'#define {name}_SIZE {len(table)}',
        f'typedef {c_type} {name.lower()}_t;',
        f'static const {name.lower()}_t {name}[{name}_SIZE] = {{',
    ]
    lines.extend(f'    {p},' for p in table.tolist())
    lines.extend([
        '};',
        '',
        f'#endif /* {name}_H */',
        '',
    ])
    return '\n'.join(lines)


def render(table: np.ndarray, fmt: str, name: str = 'PRIMES') -> str:
    if fmt == 'text':
        return to_text(table)
    if fmt == 'json':
        return to_json(table)
    if fmt == 'csv':
        return to_csv(table)
    if fmt == 'c':
        return to_c_header(table, name)
    raise ValueError(f"format {fmt!r} has no text rendering")


def write_table(table: np.ndarray, fmt: str, path: Path, name: str = 'PRIMES') -> None:
    """Write table to path in the given format."""
    path = Path(path)
    if path.parent != Path('.'):
        path.parent.mkdir(parents=True, exist_ok=True)
    if fmt == 'npy':
        np.save(path, table)
        return
    with open(path, 'w') as f:
        f.write(render(table, fmt, name))

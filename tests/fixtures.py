'''Shared test data loaded from tests/data'''

from pathlib import Path
import yaml

DATA_DIR = Path(__file__).parent / 'data'


def _hex_bytes(text: str) -> bytes:
    return bytes.fromhex(text)


def _load():
    with open(DATA_DIR / 'boundaries.yaml', 'r', encoding = 'utf-8') as f:
        data = yaml.safe_load(f)

    boundaries = [
        (int(case['code_point'], 16), _hex_bytes(case['utf8']), tuple(int(u, 16) for u in case['utf16']))
        for case in data['boundaries']
    ]
    malformed = [(_hex_bytes(case['utf8']), case['reason']) for case in data['malformed_utf8']]
    non_standard = [(_hex_bytes(case['utf8']), int(case['code_point'], 16)) for case in data['non_standard_utf8']]

    return boundaries, malformed, non_standard


BOUNDARIES, MALFORMED_UTF8, NON_STANDARD_UTF8 = _load()

import pytest

from tsp_exact import Weights
from tsp_exact.parsers import parse_instance, parse_tsp_dat, parse_tsplib_explicit

DAT = """\
# three nodes
set NODES := 1 2 3 ;

param dist :
     1 2 3 :=
1 0 1 2
2 1 0 3
3 2 3 0
;
"""

ATSP = """\
NAME: tiny
TYPE: ATSP
DIMENSION: 3
EDGE_WEIGHT_TYPE: EXPLICIT
EDGE_WEIGHT_FORMAT: FULL_MATRIX
EDGE_WEIGHT_SECTION
 0 4 9
 2 0 7
 5 1 0
EOF
"""

LOWER = """\
NAME: tri
TYPE: TSP
DIMENSION: 3
EDGE_WEIGHT_TYPE: EXPLICIT
EDGE_WEIGHT_FORMAT: LOWER_DIAG_ROW
EDGE_WEIGHT_SECTION
0
1 0
2 3 0
EOF
"""


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_dat(tmp_path, triangle):
    assert parse_tsp_dat(write(tmp_path, 'tri.dat', DAT)) == triangle


def test_dat_header_on_param_line(tmp_path, triangle):
    text = DAT.replace('param dist :\n     1 2 3 :=', 'param dist : 1 2 3 :=')
    assert parse_tsp_dat(write(tmp_path, 'tri.dat', text)) == triangle


def test_dat_without_matrix(tmp_path):
    with pytest.raises(ValueError):
        parse_tsp_dat(write(tmp_path, 'empty.dat', 'set NODES := 1 2 ;\n'))


def test_dat_ragged(tmp_path):
    text = DAT.replace('3 2 3 0', '3 2 3')
    with pytest.raises(ValueError):
        parse_tsp_dat(write(tmp_path, 'bad.dat', text))


def test_full_matrix(tmp_path):
    weights = parse_tsplib_explicit(write(tmp_path, 'tiny.atsp', ATSP))
    assert weights == Weights([[0, 4, 9], [2, 0, 7], [5, 1, 0]])
    assert not weights.is_symmetric()


def test_lower_diag_row_is_mirrored(tmp_path, triangle):
    assert parse_tsplib_explicit(write(tmp_path, 'tri.tsp', LOWER)) == triangle


def test_tsplib_errors(tmp_path):
    with pytest.raises(ValueError):
        parse_tsplib_explicit(write(tmp_path, 'a.tsp', ATSP.replace('DIMENSION: 3\n', '')))
    with pytest.raises(ValueError):
        parse_tsplib_explicit(write(tmp_path, 'b.tsp', ATSP.replace('EXPLICIT', 'EUC_2D')))
    with pytest.raises(ValueError):
        parse_tsplib_explicit(write(tmp_path, 'c.tsp', ATSP.replace(' 5 1 0\n', '')))


def test_parse_instance_dispatch(tmp_path, triangle):
    assert parse_instance(write(tmp_path, 'x.dat', DAT)) == triangle
    assert parse_instance(write(tmp_path, 'x.tsp', LOWER)) == triangle

import json

import pytest

from tsp_exact.benchmark import run_method, summarize
from tsp_exact.cli import main
from tsp_exact import numbered_locations

DAT = """\
set NODES := 1 2 3 4 ;

param dist :
     1 2 3 4 :=
1 0 1 9 1
2 1 0 1 9
3 9 1 0 1
4 1 9 1 0
;
"""


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / 'square.dat'
    path.write_text(DAT)
    return str(path)


def test_json_output(square_file, capsys):
    assert main(['--file', square_file, '--json', '--iterations', '2']) == 0
    records = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert len(records) == 6
    by_method = {}
    for rec in records:
        by_method.setdefault(rec['method'], []).append(rec)
    assert set(by_method) == {'brute_force', 'nearest_neighbour', 'branch_and_bound'}
    for recs in by_method.values():
        assert [r['run'] for r in recs] == [1, 2]
        assert all(r['cost'] == 4 for r in recs)
        assert all(r['tour'][0] == r['tour'][-1] == 3 for r in recs)
    assert by_method['brute_force'][0]['completed'] == 6


def test_text_output(square_file, capsys):
    assert main(['--file', square_file, '--methods', 'branch_and_bound', '--exclude-anchor',
                 '--anchor', '0', '--summary']) == 0
    out = capsys.readouterr().out
    assert 'branch_and_bound:' in out
    assert '0 -> 1 -> 2 -> 3 -> 0' in out
    assert 'Cost: 4' in out
    assert 'Summary:' in out


def test_default_instance_nearest_neighbour(capsys):
    assert main(['--methods', 'nearest_neighbour']) == 0
    out = capsys.readouterr().out
    assert 'Halifax -> Vancouver' in out
    assert 'Cost: 564' in out


def test_unknown_method(capsys):
    assert main(['--methods', 'simulated_annealing']) == 1
    assert 'unknown method' in capsys.readouterr().out


def test_bad_anchor(square_file, capsys):
    assert main(['--file', square_file, '--anchor', '7']) == 1
    assert 'ERROR' in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main(['--file', str(tmp_path / 'nope.dat')]) == 1
    assert 'PARSE_ERROR' in capsys.readouterr().out


def test_summary_groups_runs(triangle):
    locs = numbered_locations(3)
    records = [run_method(m, triangle, locs, 2, instance='tri', run=r)
               for r in (1, 2) for m in ('brute_force', 'branch_and_bound')]
    summary = summarize(records)
    assert len(summary) == 2
    assert set(summary['runs']) == {2}
    assert set(summary['cost_best']) == {6}
    assert set(summary['successes']) == {2}


def test_run_method_ignores_foreign_options(triangle):
    rec = run_method('nearest_neighbour', triangle, numbered_locations(3), 0, include_anchor=False, time_limit=5)
    assert rec.cost == 6
    with pytest.raises(ValueError):
        run_method('two_opt', triangle, numbered_locations(3), 0)

"""Tests for the command-line entry point's headless mode."""

import random

import pytest

from cavegen.main import build_parser, dump, main
from cavegen.simulation.automaton import step
from cavegen.simulation.cellmap import CellMap


class TestDump:
    """Tests for the headless text dump."""

    def test_dump_matches_manual_run(self):
        expected_map = CellMap(12, 8)
        expected_map.randomize(0.5, rng=random.Random(3))
        for _ in range(2):
            expected_map.update(step)

        text = dump(CellMap(12, 8), 2, random.Random(3), 0.5, rooms=False)
        assert text == expected_map.describe()

    def test_dump_runs_steps_in_one_update(self, monkeypatch):
        counts = []

        def record(states, count):
            counts.append(count)
            return states

        monkeypatch.setattr("cavegen.main.run_steps", record)
        dump(CellMap(6, 4), 5, random.Random(1), 0.5, rooms=False)
        assert counts == [5]

    def test_main_prints_description(self, capsys):
        main(["--seed", "7", "--cols", "6", "--rows", "4", "--dump", "3"])
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "[4, 6]"
        assert out[1] == "states:"
        assert len(out) == 6

    def test_same_seed_same_output(self, capsys):
        main(["--seed", "7", "--cols", "30", "--rows", "20", "--dump", "4", "--rooms"])
        first = capsys.readouterr().out
        main(["--seed", "7", "--cols", "30", "--rows", "20", "--dump", "4", "--rooms"])
        assert capsys.readouterr().out == first


class TestArguments:
    """Tests for command-line argument validation."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.cols == 160
        assert args.rows == 120
        assert args.living_chance == 0.5
        assert args.dump is None

    @pytest.mark.parametrize("argv", [
        ["--living-chance", "1.5"],
        ["--cols", "0"],
        ["--dump", "-1"],
        ["--rooms", "--cols", "5", "--dump", "1"],
    ])
    def test_bad_arguments_exit(self, argv):
        with pytest.raises(SystemExit):
            main(argv)

import argparse

import numpy as np
import pytest


@pytest.fixture
def run_board(load_script):
    return load_script('run_board')


def test_run_board_prints_every_generation(run_board, capsys):
    status = run_board.main([
        '--rows', '5', '--columns', '5', '--generations', '1',
        '--pattern', 'glider@0,1',
    ])
    assert status == 0
    assert capsys.readouterr().out == (
        "ooxoo\n"
        "oooxo\n"
        "oxxxo\n"
        "ooooo\n"
        "ooooo\n"
        "\n"
        "ooooo\n"
        "oxoxo\n"
        "ooxxo\n"
        "ooxoo\n"
        "ooooo\n"
        "\n"
    )


def test_run_board_quiet_prints_final_generation(run_board, capsys):
    status = run_board.main([
        '--rows', '5', '--columns', '5', '--generations', '2', '--quiet',
        '--pattern', 'blinker@1,1',
    ])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("ooooo\nooxoo\nooxoo\nooxoo\nooooo\n")
    assert "Generation 2, population 3" in out


def test_run_board_out_of_bounds_pattern(run_board, capsys):
    status = run_board.main(['--rows', '5', '--columns', '5', '--pattern', 'glider@3,3'])
    assert status == 2
    assert "does not fit" in capsys.readouterr().err


def test_run_board_unknown_pattern(run_board, capsys):
    status = run_board.main(['--pattern', 'pulsar@0,0'])
    assert status == 2
    assert "not found" in capsys.readouterr().err


def test_run_board_seeded_random_region_is_reproducible(run_board, capsys):
    argv = ['--rows', '6', '--columns', '6', '--generations', '3',
            '--random', '0,0,6,6', '--seed', '3', '--quiet']
    run_board.main(argv)
    first = capsys.readouterr().out
    run_board.main(argv)
    assert capsys.readouterr().out == first


def test_run_board_writes_gif(run_board, tmp_path):
    path = tmp_path / "out" / "board.gif"
    status = run_board.main([
        '--rows', '6', '--columns', '6', '--generations', '2',
        '--pattern', 'blinker@1,1', '--gif', str(path),
    ])
    assert status == 0
    assert path.exists()


def test_parse_placement(run_board):
    assert run_board.parse_placement('glider@2,3') == ('glider', 2, 3)
    with pytest.raises(argparse.ArgumentTypeError):
        run_board.parse_placement('glider')
    with pytest.raises(argparse.ArgumentTypeError):
        run_board.parse_placement('glider@a,b')


def test_parse_random_region(run_board):
    assert run_board.parse_random_region('1,2,3,4') == (1, 2, 3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        run_board.parse_random_region('1,2,3')


def test_generate_samples(load_script, tmp_path):
    generate_samples = load_script('generate_samples')
    rendered = generate_samples.generate_samples(tmp_path, grid_size=(8, 8), num_steps=3)
    assert rendered == ['blinker', 'glider']
    for name in rendered:
        assert (tmp_path / f"{name}_initial.png").exists()
        assert (tmp_path / f"{name}_trajectory.png").exists()
        assert (tmp_path / f"{name}_animation.gif").exists()


def test_run_board_random_regions_get_distinct_seeds(run_board):
    argv = ['--rows', '11', '--columns', '5', '--density', '0.5', '--seed', '3',
            '--random', '0,0,5,5', '--random', '6,0,5,5']
    first = run_board.setup_board(run_board.build_parser().parse_args(argv)).snapshot()
    second = run_board.setup_board(run_board.build_parser().parse_args(argv)).snapshot()

    assert not np.array_equal(first[0:5], first[6:11])
    np.testing.assert_array_equal(first, second)


def test_run_board_negative_random_anchor(run_board, capsys):
    status = run_board.main(['--rows', '5', '--columns', '5', '--random=-1,0,3,3'])
    assert status == 2
    assert "does not fit at (-1, 0)" in capsys.readouterr().err

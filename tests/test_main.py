#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import json

import matplotlib
matplotlib.use('Agg')

import pandas as pd

from portfolio_frontier.main import main


def test_report_printed_with_seed(capsys):
    assert main(['--seed', '42', '--simulations', '300']) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'Pareto Front:'
    assert len(lines) > 1
    for line in lines[1:]:
        assert line.startswith('Return: ')
        assert ', Risk: ' in line
        assert ', Transaction Cost: ' in line


def test_same_seed_same_report(capsys):
    main(['--seed', '3', '--simulations', '200'])
    first = capsys.readouterr().out
    main(['--seed', '3', '--simulations', '200'])
    second = capsys.readouterr().out
    assert first == second


def test_zero_simulations_prints_header_only(capsys):
    assert main(['--seed', '1', '--simulations', '0']) == 0
    assert capsys.readouterr().out == 'Pareto Front:\n'


def test_csv_and_plot_exports(tmp_path, capsys):
    csv_path = tmp_path / 'front.csv'
    plot_path = tmp_path / 'front.png'

    assert main(['--seed', '5', '--simulations', '200',
                 '--csv', str(csv_path), '--plot', str(plot_path)]) == 0

    report_rows = capsys.readouterr().out.splitlines()[1:]
    df = pd.read_csv(csv_path)
    assert len(df) == len(report_rows)
    assert 'Asset 1' in df.columns
    assert plot_path.exists() and plot_path.stat().st_size > 0


def test_invalid_config_exits_with_error(tmp_path, capsys):
    path = tmp_path / 'bad.json'
    path.write_text(json.dumps({'num_assets': 2, 'expected_returns': [0.1]}))

    assert main(['--config', str(path)]) == 1
    assert capsys.readouterr().out == ''


def test_non_psd_config_aborts_without_partial_report(tmp_path, capsys):
    path = tmp_path / 'not_psd.json'
    path.write_text(json.dumps({
        'num_assets': 2,
        'num_simulations': 20,
        'min_assets': 1,
        'max_assets': 2,
        'expected_returns': [0.1, 0.2],
        'covariance_matrix': [[0.01, -0.5], [-0.5, 0.01]],
    }))

    assert main(['--config', str(path), '--seed', '0']) == 1
    assert capsys.readouterr().out == ''


def test_unwritable_csv_path_aborts_without_report(tmp_path, capsys, caplog):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')

    assert main(['--seed', '1', '--simulations', '50',
                 '--csv', str(blocker / 'front.csv')]) == 1
    assert capsys.readouterr().out == ''
    assert any(record.levelname == 'ERROR' for record in caplog.records)

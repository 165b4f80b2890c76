import logging

import matplotlib
matplotlib.use("Agg")

import pytest

from tunneling.main import build_parser, main, params_from_args, run_batch
from tunneling.params import SimulationParameters


def test_parser_defaults_match_parameters():
    args = build_parser().parse_args([])
    assert params_from_args(args) == SimulationParameters()


def test_parser_overrides():
    args = build_parser().parse_args(
        ["--nx", "256", "--k0", "7.5", "--barrier-height", "0", "--absorb-width", "0"])
    p = params_from_args(args)
    assert (p.nx, p.k0, p.barrier_height, p.absorb_width) == (256, 7.5, 0.0, 0)


def test_run_batch_without_display(caplog):
    p = SimulationParameters(nx=256)
    with caplog.at_level(logging.INFO, logger="tunneling"):
        sim = run_batch(p, n_steps=40, save_every=10, show=False)
    assert sim.time == pytest.approx(40 * p.dt)
    text = caplog.text
    assert "tunelamento" in text
    assert "norma final" in text


def test_main_rejects_bad_grid():
    assert main(["--nx", "300", "--no-show", "--steps", "1"]) == 1


def test_main_batch_ok():
    assert main(["--nx", "128", "--absorb-width", "8", "--steps", "4",
                 "--no-show", "--log-level", "WARNING"]) == 0


def test_main_small_grid_with_default_absorber():
    assert main(["--nx", "64", "--steps", "2", "--no-show",
                 "--log-level", "WARNING"]) == 0

import logging

import main


def test_config_from_args():
    args = main.parse_args(["--population", "5", "--foods", "7", "--food-rate", "2.5", "--headless"])
    cfg = main.config_from_args(args)
    assert cfg.initial_population == 5
    assert cfg.initial_foods == 7
    assert cfg.food_rate == 2.5
    assert args.headless


def test_invalid_config_exit_code(caplog):
    with caplog.at_level(logging.ERROR):
        assert main.main(["--headless", "--population", "-1"]) == 2
    assert "invalid configuration" in caplog.text


def test_headless_run(caplog):
    with caplog.at_level(logging.INFO, logger="organism_sim"):
        assert main.main(["--headless", "--ticks", "5", "--seed", "1", "--population", "3", "--foods", "5"]) == 0
    assert "births=" in caplog.text

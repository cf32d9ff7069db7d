import pandas as pd

from reference_atmos.evaluate import main


def _write_config(tmp_path, text):
    path = tmp_path / "run.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_single_earth_altitude(capsys):
    assert main(["--altitude", "0"]) == 0
    out = capsys.readouterr().out
    assert "temperature" in out
    assert "288.15" in out


def test_single_mars_altitude(capsys):
    assert main(["--altitude", "2.172", "--body", "mars"]) == 0
    out = capsys.readouterr().out
    assert "density_h2" in out
    assert "475.13" in out


def test_single_altitude_above_top_fails():
    assert main(["--altitude", "90000"]) == 1
    assert main(["--altitude", "90000", "--extrapolate"]) == 0


def test_config_run_writes_csv(tmp_path):
    config = _write_config(
        tmp_path,
        "body: earth\n"
        "altitude: {start: 0, stop: 20000, num: 5}\n"
        "solar: {day_of_year: 80, latitude_deg: 0, longitude_deg: 0, utc_offset_hrs: 0, step_minutes: 120}\n",
    )
    out_dir = tmp_path / "out"
    assert main(["--config", config, "--output", str(out_dir)]) == 0

    profile = pd.read_csv(out_dir / "profile.csv")
    assert len(profile) == 5
    solar = pd.read_csv(out_dir / "solar.csv")
    assert len(solar) == 12


def test_config_run_with_plots(tmp_path):
    config = _write_config(tmp_path, "body: mars\naltitude: {start: 0, stop: 60, num: 13}\n")
    out_dir = tmp_path / "out"
    assert main(["--config", config, "--output", str(out_dir), "--plot"]) == 0
    assert (out_dir / "profile.png").exists()
    assert not (out_dir / "solar_path.png").exists()


def test_bad_config_fails(tmp_path):
    config = _write_config(tmp_path, "body: venus\n")
    assert main(["--config", config, "--output", str(tmp_path / "out")]) == 1


def test_missing_config_fails(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1


def test_solar_plot(tmp_path):
    config = _write_config(
        tmp_path,
        "body: earth\n"
        "altitude: {start: 0, stop: 10000, num: 3}\n"
        "solar: {day_of_year: 172, latitude_deg: 40, longitude_deg: -105, utc_offset_hrs: -7}\n",
    )
    out_dir = tmp_path / "out"
    assert main(["--config", config, "--output", str(out_dir), "--plot"]) == 0
    assert (out_dir / "solar_path.png").exists()


def test_single_altitude_far_above_top_extrapolated(capsys):
    assert main(["--altitude", "200000", "--extrapolate"]) == 0
    assert "nan" in capsys.readouterr().out

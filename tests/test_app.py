import io

from symposium.app import Simulation, main
from symposium.parse import Rules


def _lines(text):
    return [line.split(" ", 2) for line in text.splitlines()]


def test_lone_philosopher_dies():
    out = io.StringIO()
    died = Simulation(Rules(n=1, t_die=50, t_eat=10, t_sleep=10), out=out).run()
    assert died is True
    lines = _lines(out.getvalue())
    assert lines[-1] == ["50", "1", "died"]
    assert sum(1 for line in lines if line[2] == "died") == 1


def test_everyone_eats_enough():
    out = io.StringIO()
    sim = Simulation(Rules(n=2, t_die=2000, t_eat=10, t_sleep=10, t_meals=2), out=out)
    assert sim.run() is False
    lines = _lines(out.getvalue())
    assert all(line[2] != "died" for line in lines)
    for philo_id in ("1", "2"):
        eats = [line for line in lines if line[1] == philo_id and line[2] == "is eating"]
        assert len(eats) == 2
    stamps = [int(line[0]) for line in lines]
    assert stamps == sorted(stamps)
    assert [p.meals for p in sim.philosophers] == [2, 2]


def test_main_usage_error(capsys):
    assert main(["1", "2"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_invalid_args(capsys):
    assert main(["0", "100", "10", "10"]) == 1
    assert capsys.readouterr().err == "Invalid args\n"


def test_main_runs_to_completion(capsys):
    assert main(["2", "2000", "5", "5", "1"]) == 0
    lines = _lines(capsys.readouterr().out)
    assert any(line[2] == "is eating" for line in lines)
    assert all(line[2] != "died" for line in lines)
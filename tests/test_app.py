import io

from carrental.app import main, run
from carrental.service import RentalService

SCRIPT = """add
brand 1
model 2
color Red
year 2021
plate TEST-001
submit
list
quit
"""


def _run(script, service=None):
    out = io.StringIO()
    code = run(io.StringIO(script), out, service)
    return code, out.getvalue()


def test_full_add_flow_adds_car():
    service = RentalService()
    code, output = _run(SCRIPT, service)
    assert code == 0
    car = service.available_cars["i20"][0]
    assert (car.company, car.color, car.year, car.license_plate) == (
        "Hyundai", "Red", 2021, "TEST-001")
    lines = output.splitlines()
    assert "0: Select a Brand" in lines
    assert "Car Model: i20" in lines
    assert "License Plate: TEST-001" in lines


def test_lines_after_quit_are_ignored():
    service = RentalService()
    _run("quit\nadd\nbrand 1\nmodel 1\nsubmit\n", service)
    assert service.available_cars == {}


def test_unknown_command_reports_error():
    _, output = _run("fly\n")
    assert "unknown command" in output
    assert output.startswith("error:")


def test_bad_index_reports_error_and_continues():
    service = RentalService()
    _, output = _run("add\nbrand 9\nbrand 3\nmodel 1\nsubmit\n", service)
    assert output.splitlines().count("4: Select a Model") == 0
    assert "error:" in output
    assert [car.company for car in service.available_cars["Thar"]] == ["Mahindra"]


def test_empty_text_keeps_placeholder():
    service = RentalService()
    _run("add\nbrand 1\nmodel 1\ncolor\nsubmit\n", service)
    assert service.available_cars["Creta"][0].color == "Enter The color"


def test_main_reads_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("add\nquit\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    assert main([]) == 0
    assert "3: Mahindra" in out.getvalue().splitlines()
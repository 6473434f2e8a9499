import pytest

from design_patterns.catalog import PATTERNS


@pytest.mark.asyncio
@pytest.mark.parametrize("entry", PATTERNS, ids=lambda entry: entry.command)
async def test_demo_runs_to_completion(entry, capsys):
    await entry.demo()

    output = capsys.readouterr().out
    assert f"=== {entry.name} Pattern Demo ===" in output
    assert f"=== {entry.name} Pattern Demo Complete ===" in output


@pytest.mark.asyncio
async def test_observer_demo_clear_scenario(capsys):
    observer = next(entry for entry in PATTERNS if entry.name == "Observer")
    await observer.demo()

    output = capsys.readouterr().out
    assert "Observers after clear: 0" in output
    assert "Display1] Temperature Display: 30°C" in output
    assert "Temperature Display: 35°C" not in output
    assert "Error events logged: 2" in output
    assert "[ErrorLogger] Event logged: error from filtered-DB" in output

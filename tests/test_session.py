import asyncio

from xcoder_py.client.errors import ValidationFailure
from xcoder_py.client.models import ContestType, Tab, Verdict
from xcoder_py.events import LANDING_WINDOW, PROJECT_WINDOW

from conftest import verdict


def test_start_without_project_only_restores_settings(session, backend, recorder):
    asyncio.run(session.start())

    assert backend.commands() == ["get_directory", "get_editor", "get_language"]
    assert session.problem is None
    assert recorder.resizes == []


def test_start_with_project_loads_problem(session, backend, recorder):
    backend.values.update(get_directory="/proj", get_contest_type="AGC")

    asyncio.run(session.start())

    assert session.store.directory == "/proj"
    assert session.filter.contest_type is ContestType.AGC
    assert session.problem.title == "A - Chord"
    assert recorder.resizes == [PROJECT_WINDOW]


def test_open_project(session, backend):
    assert asyncio.run(session.open_project("/proj"))
    assert session.problem is not None
    assert backend.commands()[0] == "set_directory"


def test_open_project_rejected(session, backend):
    backend.failures["set_directory"] = ValidationFailure("set_directory", "missing")

    assert not asyncio.run(session.open_project("/missing"))
    assert backend.commands() == ["set_directory"]
    assert session.problem is None


def test_create_file(session, backend, recorder):
    assert asyncio.run(session.create_file())
    assert "file_created" in recorder.board


def test_open_file_requires_editor(session, backend, recorder):
    assert not asyncio.run(session.open_file())
    assert backend.calls == []
    assert "editor_not_set" in recorder.board


def test_open_file(session, backend):
    async def go():
        await session.store.set_editor("/usr/bin/vim")
        return await session.open_file()

    assert asyncio.run(go())
    assert backend.commands() == ["set_editor", "open_file"]


def test_close_saves_state(session, backend):
    assert asyncio.run(session.close())
    assert backend.commands() == ["save_state"]


def test_close_project_drops_problem_and_results(session, backend, recorder):
    async def go():
        await session.open_project("/proj")
        session.orchestrator.apply_verdicts([Verdict.from_dict(verdict("WA"))])
        return await session.close_project()

    assert asyncio.run(go())
    assert session.store.directory == ""
    assert session.problem is None
    assert session.view_state.current_tab is Tab.DESCRIPTION
    assert session.view_state.verdicts == ()
    assert recorder.resizes == [PROJECT_WINDOW, LANDING_WINDOW]


def test_rejected_close_keeps_problem(session, backend):
    asyncio.run(session.open_project("/proj"))
    backend.failures["set_directory"] = ValidationFailure("set_directory", "busy")

    assert not asyncio.run(session.close_project())
    assert session.store.directory == "/proj"
    assert session.problem.problem_id == "A"

import pytest

from growmate.tracker.state.confirmation import ConfirmationGate
from growmate.tracker.state.navigation import NavigationController
from growmate.tracker.state.views import DashboardView


@pytest.fixture()
def nav():
    return NavigationController()


@pytest.fixture()
def gate(repository, nav):
    return ConfirmationGate(repository, nav)


def test_request_delete_shows_prompt(gate, spike):
    gate.request_delete(spike)

    assert gate.pending_delete == spike
    assert gate.confirm_visible is True


def test_second_request_replaces_target(gate, rosie, spike):
    gate.request_delete(rosie)
    gate.request_delete(spike)

    assert gate.pending_delete == spike


def test_cancel_leaves_repository_and_navigation(gate, nav, repository, spike):
    nav.select_plant(spike)
    before = repository.list()

    gate.request_delete(spike)
    gate.cancel()

    assert repository.list() == before
    assert nav.dashboard_view == DashboardView.DETAIL
    assert nav.selected_plant == spike
    assert gate.pending_delete is None
    assert gate.confirm_visible is False


def test_confirm_removes_exactly_the_target(gate, nav, repository, rosie, spike):
    nav.select_plant(spike)

    gate.request_delete(spike)
    removed = gate.confirm()

    assert removed == spike
    assert repository.list() == (rosie,)
    assert nav.dashboard_view == DashboardView.LIST
    assert nav.selected_plant is None
    assert gate.confirm_visible is False


def test_confirm_without_request_is_noop(gate, nav, repository, rosie):
    nav.select_plant(rosie)

    assert gate.confirm() is None

    assert len(repository) == 2
    assert nav.dashboard_view == DashboardView.DETAIL


def test_confirm_for_plant_already_gone(gate, repository, spike):
    gate.request_delete(spike)
    repository.remove(spike.id)

    assert gate.confirm() is None
    assert len(repository) == 1
    assert gate.confirm_visible is False

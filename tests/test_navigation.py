import pytest

from growmate.tracker.state.navigation import NavigationController
from growmate.tracker.state.views import CREATE, DashboardView, EditMode, MainView

NON_DASHBOARD_VIEWS = [v for v in MainView if v != MainView.DASHBOARD]


@pytest.fixture()
def nav():
    return NavigationController()


def test_initial_state(nav):
    assert nav.main_view == MainView.DASHBOARD
    assert nav.dashboard_view == DashboardView.LIST
    assert nav.selected_plant is None
    assert nav.form_mode == CREATE


@pytest.mark.parametrize("view", NON_DASHBOARD_VIEWS)
def test_leaving_dashboard_collapses_detail(nav, rosie, view):
    nav.select_plant(rosie)

    nav.navigate(view)

    assert nav.main_view == view
    assert nav.dashboard_view == DashboardView.LIST
    assert nav.selected_plant is None


def test_navigate_to_dashboard_keeps_detail(nav, rosie):
    nav.select_plant(rosie)

    nav.navigate(MainView.DASHBOARD)

    assert nav.dashboard_view == DashboardView.DETAIL
    assert nav.selected_plant == rosie


def test_navigate_accepts_raw_value(nav):
    nav.navigate("reels")
    assert nav.main_view is MainView.REELS


def test_select_plant_opens_detail(nav, spike):
    nav.select_plant(spike)

    assert nav.dashboard_view == DashboardView.DETAIL
    assert nav.selected_plant == spike


def test_select_plant_outside_dashboard_is_ignored(nav, rosie):
    nav.navigate(MainView.USER)

    nav.select_plant(rosie)

    assert nav.main_view == MainView.USER
    assert nav.dashboard_view == DashboardView.LIST
    assert nav.selected_plant is None


def test_back(nav, rosie):
    nav.select_plant(rosie)

    nav.back()

    assert nav.dashboard_view == DashboardView.LIST
    assert nav.selected_plant is None


def test_edit_plant_enters_edit_mode(nav, rosie):
    nav.select_plant(rosie)

    nav.edit_plant(rosie)

    assert nav.main_view == MainView.ADD
    assert nav.form_mode == EditMode(plant_id=rosie.id)


def test_cancelling_edit_returns_to_detail(nav, rosie):
    nav.select_plant(rosie)
    nav.edit_plant(rosie)

    nav.navigate(MainView.DASHBOARD)

    assert nav.dashboard_view == DashboardView.DETAIL
    assert nav.selected_plant == rosie


def test_navigate_add_directly_clears_edit_mode(nav, rosie):
    nav.edit_plant(rosie)

    nav.navigate(MainView.ADD)

    assert nav.form_mode == CREATE


def test_clear_edit(nav, rosie):
    nav.edit_plant(rosie)

    nav.clear_edit()

    assert nav.form_mode == CREATE
    assert nav.main_view == MainView.ADD


def test_reset_returns_to_initial_view(rosie):
    nav = NavigationController(MainView.ENCYCLOPAEDIA)
    nav.edit_plant(rosie)

    nav.reset()

    assert nav.main_view == MainView.ENCYCLOPAEDIA
    assert nav.dashboard_view == DashboardView.LIST
    assert nav.form_mode == CREATE

"""Testes do coordenador de painéis e do hub de eventos."""

from __future__ import annotations

import pytest

from app.panels import (
    HEADER_PANELS,
    LANGUAGE_MENU,
    NOTIFICATION_TRAY,
    PROFILE_MENU,
    ElementBoundary,
    PanelCoordinator,
    PanelPolicy,
    PointerEvent,
    PointerEventHub,
    RectBoundary,
    UnknownPanelError,
)

A = RectBoundary(left=0, top=0, width=100, height=50)
B = RectBoundary(left=200, top=0, width=100, height=50)
C = RectBoundary(left=400, top=0, width=100, height=50)


@pytest.fixture
def hub() -> PointerEventHub:
    return PointerEventHub()


@pytest.fixture
def panels(hub: PointerEventHub) -> PanelCoordinator:
    coordinator = PanelCoordinator(hub)
    coordinator.register("a", A)
    coordinator.register("b", B)
    coordinator.register("c", C)
    coordinator.mount()
    return coordinator


class TestOutsideInteraction:
    def test_inside_keeps_open_and_outside_closes(
        self, hub: PointerEventHub, panels: PanelCoordinator
    ) -> None:
        panels.open("a")

        hub.dispatch(PointerEvent(x=10, y=10))
        assert panels.is_open("a")

        hub.dispatch(PointerEvent(x=150, y=300))
        assert not panels.is_open("a")

    def test_interaction_inside_one_panel_closes_the_others(
        self, hub: PointerEventHub, panels: PanelCoordinator
    ) -> None:
        panels.open("a")
        panels.open("c")

        hub.dispatch(PointerEvent(x=450, y=10))

        assert not panels.is_open("a")
        assert panels.is_open("c")

    def test_element_boundary_uses_event_target(self, hub: PointerEventHub) -> None:
        coordinator = PanelCoordinator(hub)
        coordinator.register(PROFILE_MENU, ElementBoundary(frozenset({"profile-button"})))
        coordinator.open(PROFILE_MENU)

        with coordinator.mounted():
            hub.dispatch(PointerEvent(0, 0, target="profile-button"))
            assert coordinator.is_open(PROFILE_MENU)
            hub.dispatch(PointerEvent(0, 0, target="page"))
            assert not coordinator.is_open(PROFILE_MENU)


class TestCommands:
    def test_independent_policy_allows_many_open(self, panels: PanelCoordinator) -> None:
        assert panels.policy is PanelPolicy.INDEPENDENT
        panels.open("a")
        panels.open("b")
        assert panels.snapshot() == {"a": True, "b": True, "c": False}

        panels.close("a")
        assert panels.snapshot() == {"a": False, "b": True, "c": False}

    def test_toggle(self, panels: PanelCoordinator) -> None:
        panels.toggle("b")
        assert panels.is_open("b")
        panels.toggle("b")
        assert not panels.is_open("b")

    def test_exclusive_policy_closes_others(self, hub: PointerEventHub) -> None:
        coordinator = PanelCoordinator(hub, policy=PanelPolicy.EXCLUSIVE)
        for panel_id in HEADER_PANELS:
            coordinator.register(panel_id)

        coordinator.open(PROFILE_MENU)
        coordinator.open(NOTIFICATION_TRAY)

        assert not coordinator.is_open(PROFILE_MENU)
        assert coordinator.is_open(NOTIFICATION_TRAY)
        assert not coordinator.is_open(LANGUAGE_MENU)

    def test_unknown_panel(self, panels: PanelCoordinator) -> None:
        assert panels.is_open("nope") is False
        with pytest.raises(UnknownPanelError):
            panels.open("nope")

    def test_close_all(self, panels: PanelCoordinator) -> None:
        panels.open("a")
        panels.open("b")
        panels.close_all()
        assert not any(panels.snapshot().values())


class TestListenerLifecycle:
    def test_mount_installs_exactly_one_listener(
        self, hub: PointerEventHub, panels: PanelCoordinator
    ) -> None:
        panels.mount()
        panels.mount()
        assert hub.listener_count == 1

        panels.unmount()
        panels.unmount()
        assert hub.listener_count == 0

    def test_remount_does_not_leak(self, hub: PointerEventHub) -> None:
        coordinator = PanelCoordinator(hub)
        coordinator.register("a", A)
        for _ in range(3):
            with coordinator.mounted():
                assert hub.listener_count == 1
        assert hub.listener_count == 0
        assert not coordinator.is_mounted

    def test_unmounted_coordinator_ignores_interactions(
        self, hub: PointerEventHub, panels: PanelCoordinator
    ) -> None:
        panels.open("a")
        panels.unmount()
        hub.dispatch(PointerEvent(x=999, y=999))
        assert panels.is_open("a")

    def test_mounted_scope_removes_listener_on_error(self, hub: PointerEventHub) -> None:
        coordinator = PanelCoordinator(hub)
        with pytest.raises(RuntimeError), coordinator.mounted():
            raise RuntimeError("falha no render")
        assert hub.listener_count == 0

    def test_hub_remove_unknown_listener(self, hub: PointerEventHub) -> None:
        assert hub.remove_listener(lambda _event: None) is False


def test_rect_boundary_edges_are_inclusive() -> None:
    assert A.contains(PointerEvent(0, 0))
    assert A.contains(PointerEvent(100, 50))
    assert not A.contains(PointerEvent(100.5, 50))

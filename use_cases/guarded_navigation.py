"""Guarded navigation: navigation that first asks the user to confirm."""

import logging
from typing import Any, Callable, Optional

from use_cases.domain_models import ConfirmationConfig, NavigationRequest
from use_cases.overlays import ConfirmationPrompt, OverlayCoordinator
from use_cases.screens import LANDING, validate_screen

log = logging.getLogger(__name__)


def navigation_confirmation(request: NavigationRequest, current_screen: str) -> ConfirmationConfig:
    """Copy for a guarded navigation; leaving the payment screen gets its own."""
    if request.target == "checkout" and current_screen == "paymentLoading":
        return ConfirmationConfig(
            title="Batalkan Pembayaran?",
            message=(
                "Apakah Anda yakin ingin membatalkan proses pembayaran dan kembali ke halaman checkout? "
                "Pesanan Anda belum selesai."
            ),
            confirm_label="Ya, Batalkan",
            cancel_label="Tidak, Tetap di Sini",
            on_confirm_target=request,
            tone="danger",
        )
    return ConfirmationConfig(
        title="Konfirmasi Navigasi",
        message=(
            "Anda memiliki item di keranjang atau data yang belum disimpan. Apakah Anda yakin ingin "
            "meninggalkan halaman ini? Perubahan Anda akan hilang."
        ),
        confirm_label="Ya, Tinggalkan",
        cancel_label="Tidak, Tetap di Sini",
        on_confirm_target=request,
    )


def logout_confirmation(reset_callback: Callable[[], None]) -> ConfirmationConfig:
    return ConfirmationConfig(
        title="Konfirmasi Logout",
        message="Apakah Anda yakin ingin keluar dari akun Anda?",
        confirm_label="Ya, Logout",
        cancel_label="Batal",
        on_confirm_target=NavigationRequest(target=LANDING, reset_callback=reset_callback),
    )


class GuardedNavigationGate:
    def __init__(
        self,
        overlays: OverlayCoordinator,
        navigate: Callable[[str, Any], None],
        current_screen: Callable[[], str],
    ) -> None:
        self._overlays = overlays
        self._navigate = navigate
        self._current_screen = current_screen

    @property
    def prompt(self) -> Optional[ConfirmationPrompt]:
        active = self._overlays.active
        return active if isinstance(active, ConfirmationPrompt) else None

    def request(
        self,
        target: str,
        payload: Any = None,
        reset_callback: Optional[Callable[[], None]] = None,
    ) -> ConfirmationConfig:
        request = NavigationRequest(target=validate_screen(target), payload=payload, reset_callback=reset_callback)
        config = navigation_confirmation(request, self._current_screen())
        self.open(config)
        return config

    def open(self, config: ConfirmationConfig) -> None:
        log.debug(f"Confirmation requested for {config.on_confirm_target.target}")
        self._overlays.open(ConfirmationPrompt(config))

    def confirm(self) -> bool:
        prompt = self.prompt
        if prompt is None:
            return False
        request = prompt.config.on_confirm_target
        self._overlays.discard_suspended()
        if request.reset_callback is not None:
            request.reset_callback()
        self._navigate(request.target, request.payload)
        self._overlays.close(ConfirmationPrompt)
        log.info(f"Confirmed navigation to {request.target}")
        return True

    def cancel(self) -> bool:
        if self.prompt is None:
            return False
        self._overlays.close(ConfirmationPrompt)
        log.debug("Confirmation cancelled")
        return True

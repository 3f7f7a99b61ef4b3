from __future__ import annotations

from unittest.mock import Mock, patch

from boxlogo.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True
    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


def test_init_with_tty_enabled():
    with patch("boxlogo.services.progress.is_tty_enabled", return_value=True), \
         patch("boxlogo.services.progress.tqdm") as mock_tqdm:
        tracker = ProgressTracker(3)
        assert tracker.enabled is True
        mock_tqdm.assert_called_once_with(
            total=3,
            desc="Rendering logos",
            unit="logo",
            disable=False,
            leave=True,
            position=0,
            ncols=80,
            ascii=True,
        )


def test_init_with_tty_disabled():
    with patch("boxlogo.services.progress.is_tty_enabled", return_value=False):
        tracker = ProgressTracker(3)
        assert tracker.enabled is False
        assert tracker.pbar is None
        # no-op when disabled
        tracker.start_row("Box")
        tracker.finish_row()
        tracker.close()
        assert tracker.current_row == 1


def test_row_updates_with_tty():
    mock_pbar = Mock()
    with patch("boxlogo.services.progress.is_tty_enabled", return_value=True), \
         patch("boxlogo.services.progress.tqdm", return_value=mock_pbar):
        with ProgressTracker(2) as tracker:
            tracker.start_row("Box")
            mock_pbar.set_description.assert_called_with("Rendering logos (Box)")
            tracker.finish_row()
            mock_pbar.update.assert_called_once_with(1)
            mock_pbar.set_description.assert_called_with("Rendering logos")
        mock_pbar.close.assert_called_once()
        assert tracker.pbar is None

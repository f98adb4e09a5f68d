"""QSS stylesheet and phase colours for FocusTimer."""

from __future__ import annotations

from ..timer.phase import SessionPhase

# ── phase colours (progress bar chunk) ──────────────────────────────────

PHASE_COLORS: dict[SessionPhase, str] = {
    SessionPhase.FOCUSING: "#FF6B6B",   # warm coral
    SessionPhase.ON_BREAK: "#4ECDC4",   # cool teal
}
PAUSED_COLOR = "#6C7086"

# ── palette ─────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = dict(PALETTE)
    if palette:
        p.update(palette)
    return f"""
        QWidget {{
            background-color: {p['bg']};
            color: {p['text']};
            font-size: 14px;
        }}
        QFrame#card {{
            background-color: {p['surface']};
            border: 1px solid {p['border']};
            border-radius: 12px;
        }}
        QLabel#sessionTitle {{
            font-size: 20px;
            font-weight: 600;
        }}
        QLabel#sessionSubTitle {{
            color: {p['text_muted']};
        }}
        QLabel#pausedLabel {{
            color: {p['accent']};
            font-weight: 600;
        }}
        QPushButton {{
            background-color: {p['surface']};
            border: 1px solid {p['border']};
            border-radius: 6px;
            padding: 6px 14px;
        }}
        QPushButton:disabled {{
            color: {p['text_muted']};
        }}
        QPushButton#primaryButton {{
            background-color: {p['accent']};
            color: {p['bg']};
            font-weight: 600;
        }}
        QPushButton#dangerButton {{
            color: {p['danger']};
        }}
        QProgressBar {{
            border: 1px solid {p['border']};
            border-radius: 6px;
            background-color: {p['bg']};
            min-height: 20px;
        }}
    """


def progress_chunk_style(phase: SessionPhase | None, paused: bool) -> str:
    """Stylesheet fragment colouring the progress bar for *phase*."""
    if phase is None:
        color = PALETTE["border"]
    elif paused:
        color = PAUSED_COLOR
    else:
        color = PHASE_COLORS[phase]
    return f"QProgressBar::chunk {{ background-color: {color}; border-radius: 6px; }}"

"""App Kivy: formulario de mediciones, resultados, tips e historial."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime

import pandas as pd

from health_tracker.guidance import (
    ACTION_PLAN,
    CATEGORY_REFERENCE,
    MEDICAL_DISCLAIMER,
    PCOS_EDUCATION,
    WEIGHT_LOSS_NOTE,
    WHAT_IS_PCOS,
)
from health_tracker.model import LatestReport, TipBlock
from health_tracker.tracker import HealthTracker
from health_tracker.validation import EntryValidationError, local_today

logger = logging.getLogger(__name__)


def run_app() -> int:
    """Lanza la app Kivy."""
    from kivy.app import App
    from kivy.core.window import Window
    from kivy.resources import resource_find
    from kivy.uix.boxlayout import BoxLayout
    from kivy.uix.button import Button
    from kivy.uix.label import Label
    from kivy.uix.popup import Popup
    from kivy.uix.scrollview import ScrollView
    from kivy.uix.textinput import TextInput

    def make_section(title: str, body: str) -> BoxLayout:
        box = BoxLayout(orientation="vertical", spacing=4, size_hint_y=None)
        box.bind(minimum_height=box.setter("height"))
        if title:
            box.add_widget(
                Label(
                    text=f"[b]{title}[/b]",
                    markup=True,
                    size_hint_y=None,
                    height=28,
                )
            )
        text = Label(text=body, size_hint_y=None, halign="left", valign="top")
        text.bind(
            width=lambda lbl, width: setattr(lbl, "text_size", (width, None)),
            texture_size=lambda lbl, size: setattr(lbl, "height", size[1]),
        )
        box.add_widget(text)
        return box

    class HealthTrackerApp(App):
        """Main Kivy app."""

        def __init__(self, **kwargs: object) -> None:
            super().__init__(**kwargs)
            self.tracker = HealthTracker()
            self.date_input: TextInput | None = None
            self.weight_input: TextInput | None = None
            self.height_input: TextInput | None = None
            self.status: Label | None = None
            self.latest_box: BoxLayout | None = None
            self.tips_box: BoxLayout | None = None
            self.history_box: BoxLayout | None = None
            self.history: TextInput | None = None
            self._preview_font = resource_find("data/fonts/RobotoMono-Regular.ttf")

        def build(self) -> BoxLayout:
            self.title = "Health & BMI Tracker"
            Window.bind(on_key_down=self._on_key_down)

            root = BoxLayout(orientation="vertical", spacing=8, padding=10)
            root.add_widget(
                Label(
                    text=(
                        "Track your weight, calculate BMI, and monitor PCOS "
                        "risk factors"
                    ),
                    size_hint_y=None,
                    height=36,
                )
            )
            root.add_widget(self._build_form())

            self.status = Label(text="No entries yet", size_hint_y=None, height=30)
            root.add_widget(self.status)

            content = BoxLayout(orientation="vertical", spacing=12, size_hint_y=None)
            content.bind(minimum_height=content.setter("height"))

            self.latest_box = BoxLayout(
                orientation="vertical", spacing=6, size_hint_y=None
            )
            self.latest_box.bind(minimum_height=self.latest_box.setter("height"))
            content.add_widget(self.latest_box)

            content.add_widget(
                make_section("BMI Categories Reference", _format_reference())
            )
            content.add_widget(
                make_section(
                    "Understanding PCOS and Weight Connection", _format_education()
                )
            )

            self.tips_box = BoxLayout(
                orientation="vertical", spacing=6, size_hint_y=None
            )
            self.tips_box.bind(minimum_height=self.tips_box.setter("height"))
            content.add_widget(self.tips_box)

            self.history_box = BoxLayout(
                orientation="vertical", spacing=6, size_hint_y=None
            )
            self.history_box.bind(minimum_height=self.history_box.setter("height"))
            content.add_widget(self.history_box)

            content.add_widget(make_section("", MEDICAL_DISCLAIMER))

            scroll = ScrollView()
            scroll.add_widget(content)
            root.add_widget(scroll)

            self._refresh()
            return root

        def _build_form(self) -> BoxLayout:
            form = BoxLayout(orientation="vertical", spacing=6, size_hint_y=None)
            form.bind(minimum_height=form.setter("height"))

            fields = BoxLayout(
                orientation="horizontal",
                spacing=8,
                size_hint_y=None,
                height=36,
            )
            self.date_input = TextInput(multiline=False)
            self.weight_input = TextInput(
                multiline=False, hint_text="e.g., 65.5", input_filter="float"
            )
            self.height_input = TextInput(
                multiline=False, hint_text="e.g., 165.5", input_filter="float"
            )
            for label, inp in (
                ("Date", self.date_input),
                ("Weight (kg)", self.weight_input),
                ("Height (cm)", self.height_input),
            ):
                fields.add_widget(Label(text=label, size_hint_x=0.4))
                fields.add_widget(inp)
            form.add_widget(fields)

            actions = BoxLayout(
                orientation="horizontal",
                spacing=8,
                size_hint_y=None,
                height=40,
            )
            add_btn = Button(text="Add Entry")
            exit_btn = Button(text="Salir", size_hint_x=0.3)
            add_btn.bind(on_press=self._on_submit)
            exit_btn.bind(on_press=lambda *_args: self.stop())
            actions.add_widget(add_btn)
            actions.add_widget(exit_btn)
            form.add_widget(actions)

            self._reset_form()
            return form

        def _on_key_down(
            self,
            _window: object,
            keycode: int,
            _scancode: int,
            _text: str,
            _modifiers: list[str],
        ) -> bool:
            # Esc: salir de fullscreen o cerrar app.
            if keycode != 27:
                return False
            if Window.fullscreen:
                Window.fullscreen = False
            else:
                self.stop()
            return True

        def _on_submit(self, _: object) -> None:
            if (
                self.date_input is None
                or self.weight_input is None
                or self.height_input is None
            ):
                return
            try:
                entry = self.tracker.submit(
                    self.date_input.text,
                    self.weight_input.text,
                    self.height_input.text,
                )
            except EntryValidationError as exc:
                # El formulario conserva los valores para corregir.
                self._show_notice(str(exc))
                return
            except Exception as exc:
                self._show_error("agregar la entrada", exc)
                return

            self._reset_form()
            self._refresh()
            if self.status is not None:
                self.status.text = (
                    f"Entry added: {entry.date.isoformat()} BMI {entry.bmi}"
                )

        def _reset_form(self) -> None:
            if self.date_input is not None:
                self.date_input.text = local_today(self.tracker.config).isoformat()
            if self.weight_input is not None:
                self.weight_input.text = ""
            if self.height_input is not None:
                self.height_input.text = ""

        def _refresh(self) -> None:
            report = self.tracker.latest_report()
            if self.latest_box is not None:
                self.latest_box.clear_widgets()
                if report is not None:
                    self.latest_box.add_widget(
                        make_section("Latest BMI Results", _format_latest(report))
                    )
                    self.latest_box.add_widget(
                        make_section("PCOS Risk Assessment", _format_risk(report))
                    )
            if self.tips_box is not None:
                self.tips_box.clear_widgets()
                if report is not None:
                    self.tips_box.add_widget(
                        make_section("Personalized Health Tips", _format_tips(report))
                    )
            if self.history_box is not None:
                self.history_box.clear_widgets()
                if len(self.tracker.store):
                    self.history_box.add_widget(
                        Label(
                            text="[b]Entry History[/b]",
                            markup=True,
                            size_hint_y=None,
                            height=28,
                        )
                    )
                    self.history = self._history_widget()
                    self.history_box.add_widget(self.history)

        def _history_widget(self) -> TextInput:
            rows = self.tracker.config.history_preview_rows
            display_df = _display_frame(self.tracker.store.to_frame().head(rows))
            text = display_df.to_string(index=False, max_colwidth=28)
            history = TextInput(
                readonly=True,
                text=text,
                multiline=True,
                do_wrap=False,
                size_hint_y=None,
                height=30 + 22 * (len(display_df) + 1),
            )
            if self._preview_font:
                history.font_name = self._preview_font
            return history

        def _show_notice(self, message: str) -> None:
            content = BoxLayout(orientation="vertical", spacing=8, padding=8)
            content.add_widget(Label(text=message))
            ok_btn = Button(text="OK", size_hint_y=None, height=40)
            content.add_widget(ok_btn)
            popup = Popup(
                title="Invalid entry",
                content=content,
                size_hint=(0.6, 0.4),
                auto_dismiss=False,
            )
            ok_btn.bind(on_press=lambda *_args: popup.dismiss())
            popup.open()

        def _show_error(self, action: str, exc: Exception) -> None:
            error_type = type(exc).__name__
            logger.exception("Error al %s", action)
            if self.status is not None:
                self.status.text = f"Error al {action} ({error_type}): {exc}"

    HealthTrackerApp().run()
    return 0


def _format_latest(report: LatestReport) -> str:
    entry = report.entry
    return "\n".join(
        [
            f"BMI Score: {_format_preview_value(entry.bmi)}",
            f"Category: {entry.category.value}",
            f"Weight: {_format_preview_value(entry.weight)} kg",
            f"Height: {_format_preview_value(entry.height)} cm",
        ]
    )


def _format_risk(report: LatestReport) -> str:
    return f"{report.entry.risk_label.value}\n{report.advisory}"


def _format_tips(report: LatestReport) -> str:
    entry = report.entry
    tips = report.tips
    parts = [
        "Customized recommendations based on your BMI: "
        f"{_format_preview_value(entry.bmi)} ({entry.category.value})",
        "Exercise Recommendations",
        _format_tip_blocks([tips.exercise]),
        "Nutrition Guidelines",
        _format_tip_blocks([tips.nutrition]),
        "Lifestyle & Wellness",
        _format_tip_blocks(tips.lifestyle),
        "Your 30-Day Action Plan:",
        _format_tip_blocks(ACTION_PLAN),
    ]
    return "\n\n".join(parts)


def _format_tip_blocks(blocks: Sequence[TipBlock]) -> str:
    """Render tip blocks as heading + bullet lines."""
    lines: list[str] = []
    for block in blocks:
        lines.append(block.title)
        lines.extend(f"  • {item}" for item in block.items)
    return "\n".join(lines)


def _format_reference() -> str:
    return "\n".join(f"{label}: {bounds}" for label, bounds in CATEGORY_REFERENCE)


def _format_education() -> str:
    parts = [
        f"What is PCOS?\n{WHAT_IS_PCOS}",
        _format_tip_blocks(PCOS_EDUCATION),
        WEIGHT_LOSS_NOTE,
    ]
    return "\n\n".join(parts)


def _display_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Prepare a string-renderable DataFrame for aligned preview."""
    if df.empty:
        return df.copy()
    out = df.copy()
    for col in out.columns:
        out[col] = out[col].map(_format_preview_value)
    return out


def _format_preview_value(value: object) -> str:
    """Format preview values without NaN/scientific notation."""
    if value is None or pd.isna(value):
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        text = format(value, "f").rstrip("0").rstrip(".")
        return text if text else "0"
    return str(value)

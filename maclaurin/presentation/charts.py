"""
Charts — данные графиков и отрисовка через matplotlib

Два графика:
- основной: e^x (сплошная линия) и P_n(x) (пунктир) в фиксированном
  диапазоне y [-2, 10], чтобы расхождение было видно без сжатия
- график ошибки: e^x - P_n(x) с заливкой, автомасштаб по y

build_chart_data собирает независимое от библиотеки описание серий.
SweepChartView владеет фигурой matplotlib: создаётся один раз и
перерисовывается на каждый новый SweepResult.

matplotlib импортируется лениво (внутри методов), чтобы пакет
импортировался без него.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from maclaurin.core.domain.sweep import SweepResult

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


# =============================================================================
# THEME
# =============================================================================


@dataclass(frozen=True)
class ChartTheme:
    """Цвета, линии и шкалы графиков."""

    text_color: str = "#5C5C5C"
    grid_color: str = "#E5E7EB"

    true_color: str = "#2A2A2A"  # Warm charcoal
    approx_color: str = "#14B8A6"  # Bright teal
    error_color: str = "#EF4444"
    error_fill_alpha: float = 0.1

    line_width: float = 2.0
    error_line_width: float = 1.5
    approx_dash: tuple[float, float] = (5.0, 5.0)

    y_min: float = -2.0
    y_max: float = 10.0
    max_x_ticks: int = 10


# =============================================================================
# CHART DATA
# =============================================================================


@dataclass(frozen=True)
class ChartSeries:
    """Одна линия графика."""

    label: str
    values: list[float]
    color: str
    line_width: float
    dash: tuple[float, ...] = ()
    fill: bool = False


@dataclass(frozen=True)
class ChartPanel:
    """Один график: точки x, их метки и набор серий."""

    x_values: list[float]
    labels: list[str]
    series: list[ChartSeries]
    y_limits: tuple[float, float] | None = None
    x_title: str | None = None
    y_title: str | None = None
    show_legend: bool = True
    show_x_axis: bool = True


@dataclass(frozen=True)
class ChartData:
    main: ChartPanel
    error: ChartPanel


def build_chart_data(result: SweepResult, theme: ChartTheme | None = None) -> ChartData:
    """
    Описание обоих графиков по результату прохода.

    Args:
        result: результат run_sweep
        theme: тема (default: ChartTheme())

    Returns:
        ChartData с основным графиком и графиком ошибки
    """
    theme = theme or ChartTheme()

    main = ChartPanel(
        x_values=list(result.samples),
        labels=list(result.labels),
        series=[
            ChartSeries(
                label="True function eˣ",
                values=list(result.true_values),
                color=theme.true_color,
                line_width=theme.line_width,
            ),
            ChartSeries(
                label=f"Maclaurin P{_subscript(result.degree)}(x)",
                values=list(result.approx_values),
                color=theme.approx_color,
                line_width=theme.line_width,
                dash=theme.approx_dash,
            ),
        ],
        y_limits=(theme.y_min, theme.y_max),
        x_title="x",
        y_title="y",
    )
    error = ChartPanel(
        x_values=list(result.samples),
        labels=list(result.labels),
        series=[
            ChartSeries(
                label="Error (eˣ - Pₙ(x))",
                values=list(result.errors),
                color=theme.error_color,
                line_width=theme.error_line_width,
                fill=True,
            )
        ],
        show_legend=False,
        show_x_axis=False,
    )
    return ChartData(main=main, error=error)


_SUBSCRIPT_DIGITS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


def _subscript(n: int) -> str:
    return str(n).translate(_SUBSCRIPT_DIGITS)


# =============================================================================
# MATPLOTLIB VIEW
# =============================================================================


@dataclass
class SweepChartView:
    """Фигура с основным графиком и графиком ошибки.

    Создаётся один раз; render() заменяет данные обоих графиков.
    """

    theme: ChartTheme = field(default_factory=ChartTheme)
    figsize: tuple[float, float] = (9.0, 6.0)

    figure: Figure = field(init=False, repr=False)
    main_ax: Axes = field(init=False, repr=False)
    error_ax: Axes = field(init=False, repr=False)
    _lines: dict[str, Any] = field(init=False, repr=False, default_factory=dict)
    _fill: Any = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        from matplotlib.figure import Figure

        self.figure = Figure(figsize=self.figsize, layout="constrained")
        self.main_ax, self.error_ax = self.figure.subplots(
            2, 1, gridspec_kw={"height_ratios": [3, 1]}
        )
        for ax in (self.main_ax, self.error_ax):
            ax.grid(True, color=self.theme.grid_color)
            ax.tick_params(colors=self.theme.text_color)
            for spine in ax.spines.values():
                spine.set_visible(False)

    def render(self, result: SweepResult) -> ChartData:
        """
        Перерисовка обоих графиков.

        Returns:
            ChartData, по которому выполнена отрисовка
        """
        from matplotlib.ticker import MaxNLocator

        data = build_chart_data(result, self.theme)
        self._draw_panel("main", self.main_ax, data.main)
        self._draw_panel("error", self.error_ax, data.error)
        self.main_ax.xaxis.set_major_locator(MaxNLocator(self.theme.max_x_ticks))
        return data

    def _draw_panel(self, name: str, ax: Axes, panel: ChartPanel) -> None:
        xs = panel.x_values
        for index, series in enumerate(panel.series):
            key = f"{name}:{index}"
            line = self._lines.get(key)
            if line is None:
                (line,) = ax.plot(
                    xs,
                    series.values,
                    color=series.color,
                    linewidth=series.line_width,
                )
                self._lines[key] = line
            else:
                line.set_data(xs, series.values)
            line.set_label(series.label)
            if series.dash:
                line.set_dashes(series.dash)

            if series.fill:
                if self._fill is not None:
                    self._fill.remove()
                self._fill = ax.fill_between(
                    xs,
                    series.values,
                    0.0,
                    color=series.color,
                    alpha=self.theme.error_fill_alpha,
                    linewidth=0,
                )

        if panel.y_limits is not None:
            ax.set_ylim(*panel.y_limits)
            ax.relim()
            ax.autoscale_view(scaley=False)
        else:
            ax.relim()
            ax.autoscale_view()

        if panel.x_title:
            ax.set_xlabel(panel.x_title, color=self.theme.text_color)
        if panel.y_title:
            ax.set_ylabel(panel.y_title, color=self.theme.text_color)
        ax.xaxis.set_visible(panel.show_x_axis)

        if panel.show_legend:
            ax.legend(loc="upper center", ncol=len(panel.series), frameon=False)

    def save(self, path: str | Path, dpi: int = 150) -> Path:
        """Сохранение фигуры в файл (формат по расширению)."""
        path = Path(path)
        self.figure.savefig(path, dpi=dpi)
        return path

"""Chart helpers rendering projection results to PNG."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from .engine import PayoffResult, RetirementResult


def _currency_axis(ax) -> None:
    ax.yaxis.set_major_formatter(mticker.FuncFormatter(lambda x, p: f"${x:,.0f}"))


def debt_payoff_chart_png(result: PayoffResult, output_path: Path) -> Path:
    """Render the total remaining balance month by month."""

    totals = [point.balance for point in result.balance_series]
    labels = [point.label or f"M{point.month}" for point in result.balance_series]

    fig, ax = plt.subplots(figsize=(10, 6))

    if totals:
        x_vals = list(range(1, len(totals) + 1))
        ax.plot(x_vals, totals, marker="o", color="#4F46E5", linewidth=2.5, markersize=4)
        ax.fill_between(x_vals, totals, color="#E0E7FF", alpha=0.5)

        # Mark the month each debt is cleared
        for debt_id in result.payoff_order:
            month = result.payoff_month(debt_id)
            if month:
                ax.axvline(x=month, color="#22C55E", linestyle="--", alpha=0.5, linewidth=1)

        if result.complete:
            ax.scatter([x_vals[-1]], [0], s=200, c="gold", marker="*", zorder=5, edgecolors="#F59E0B")
            ax.annotate(
                "DEBT FREE!",
                (x_vals[-1], 0),
                xytext=(0, 25),
                textcoords="offset points",
                ha="center",
                fontsize=12,
                fontweight="bold",
                color="#16A34A",
            )

        ax.grid(True, linestyle="--", alpha=0.3)
        ax.set_axisbelow(True)
        ax.set_title(
            f"Debt Payoff Projection ({result.strategy.value.title()})",
            fontsize=14,
            fontweight="bold",
            pad=15,
        )
        ax.set_ylabel("Remaining Balance ($)", fontsize=11)
        ax.set_xlabel("Month", fontsize=11)

        tick_step = max(1, len(x_vals) // 8)
        ax.set_xticks(x_vals[::tick_step])
        ax.set_xticklabels(labels[::tick_step], rotation=45, ha="right")
        _currency_axis(ax)

        textstr = (
            f"Months to Payoff: {result.total_months}\n"
            f"Total Interest: ${result.total_interest:,.0f}"
        )
        props = dict(boxstyle="round", facecolor="lavender", alpha=0.8)
        ax.text(0.98, 0.98, textstr, transform=ax.transAxes, fontsize=9,
                verticalalignment="top", horizontalalignment="right", bbox=props)
    else:
        ax.text(0.5, 0.5, "No payoff schedule", ha="center", va="center", fontsize=14, color="#666")
        ax.axis("off")

    plt.tight_layout()
    output_path = Path(output_path)
    fig.savefig(output_path, bbox_inches="tight", dpi=100)
    plt.close(fig)
    return output_path


def retirement_chart_png(result: RetirementResult, output_path: Path) -> Path:
    """Render the portfolio balance by age, shading accumulation vs drawdown."""

    fig, ax = plt.subplots(figsize=(10, 6))
    ages = [point.age for point in result.trajectory]
    balances = [point.balance for point in result.trajectory]

    ax.plot(ages, balances, color="#3B82F6", linewidth=2.5)
    ax.fill_between(
        ages,
        balances,
        where=[p.phase == "accumulation" for p in result.trajectory],
        color="#DBEAFE",
        alpha=0.7,
        label="Accumulation",
    )
    ax.fill_between(
        ages,
        balances,
        where=[p.phase != "accumulation" for p in result.trajectory],
        color="#FEF3C7",
        alpha=0.7,
        label="Retirement",
    )
    ax.axhline(y=result.required_nest_egg, color="#EF4444", linestyle="--", linewidth=1.5,
               label="Required nest egg")

    ax.grid(True, linestyle="--", alpha=0.3)
    ax.set_title("Retirement Projection", fontsize=14, fontweight="bold", pad=15)
    ax.set_xlabel("Age", fontsize=11)
    ax.set_ylabel("Balance ($)", fontsize=11)
    _currency_axis(ax)
    ax.legend(loc="upper left")

    plt.tight_layout()
    output_path = Path(output_path)
    fig.savefig(output_path, bbox_inches="tight", dpi=100)
    plt.close(fig)
    return output_path

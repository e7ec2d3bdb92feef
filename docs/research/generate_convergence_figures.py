"""
Generate figures for the lattice engine.
Outputs: Lattice convergence to Black-Scholes, Early exercise premium

Run: python docs/research/generate_convergence_figures.py
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from option_lattice.pricing_models.contracts import AmericanPut, EuropeanCall, EuropeanPut

plt.rcParams.update(
    {
        "font.family": "serif",
        "font.size": 11,
        "axes.labelsize": 12,
        "axes.titlesize": 13,
        "legend.fontsize": 10,
        "figure.dpi": 300,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
        "axes.grid": True,
        "grid.alpha": 0.3,
    }
)

OUTPUT_DIR = Path(__file__).parent / "figures"
OUTPUT_DIR.mkdir(exist_ok=True)


def generate_convergence():
    """Figure 1: European call lattice value vs step count"""

    call = EuropeanCall(100, 1.0, 0.2, 0.05)
    steps = np.arange(10, 501, 5)
    values = np.array([call.lattice_value(100.0, int(n)) for n in steps])
    analytic = call.analytic_value(100.0)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(11, 4.5))

    ax1.plot(steps, values, color="#1f77b4", linewidth=1.2, label="CRR lattice")
    ax1.axhline(analytic, color="#d62728", linestyle="--", label="Black-Scholes")
    ax1.set_xlabel("Steps (N)")
    ax1.set_ylabel("Call value")
    ax1.set_title("Lattice value")
    ax1.legend()

    ax2.loglog(steps, np.abs(values - analytic), color="#2ca02c", linewidth=1.2, label="|error|")
    ax2.loglog(steps, 2.0 / steps, color="gray", linestyle=":", label="O(1/N)")
    ax2.set_xlabel("Steps (N)")
    ax2.set_title("Absolute error")
    ax2.legend()

    fig.savefig(OUTPUT_DIR / "lattice_convergence.png")
    plt.close(fig)


def generate_early_exercise_premium():
    """Figure 2: American vs European put across spots"""

    american = AmericanPut(100, 1.0, 0.2, 0.05)
    european = EuropeanPut(100, 1.0, 0.2, 0.05)
    spots = np.linspace(50, 150, 81)

    american_values = np.array([american.lattice_value(s, 500) for s in spots])
    european_values = np.array([european.analytic_value(s) for s in spots])

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(spots, american_values, label="American (lattice)")
    ax.plot(spots, european_values, label="European (Black-Scholes)")
    ax.plot(spots, np.maximum(100 - spots, 0), color="gray", linestyle=":", label="Intrinsic")
    ax.set_xlabel("Spot")
    ax.set_ylabel("Put value")
    ax.set_title("Early exercise premium")
    ax.legend()

    fig.savefig(OUTPUT_DIR / "early_exercise_premium.png")
    plt.close(fig)


if __name__ == "__main__":
    generate_convergence()
    generate_early_exercise_premium()
    print(f"Figures written to {OUTPUT_DIR}")

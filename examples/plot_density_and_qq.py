"""
Example: histogram of rnorm draws with a dnorm overlay, and a normal Q-Q plot
built from qnorm.

Setup:
    pip install matplotlib

Run:
    python examples/plot_density_and_qq.py
"""
import numpy as np
import matplotlib.pyplot as plt
from normr import dnorm, qnorm, rnorm


def main():
    mean, sd = 100.0, 15.0
    xs = rnorm(2000, mean=mean, sd=sd, rng=2024)

    # Histogram with the theoretical density curve
    fig, ax = plt.subplots(figsize=(9, 5))
    ax.hist(xs, bins=40, density=True, alpha=0.5, label="rnorm sample")
    grid = np.linspace(mean - 4*sd, mean + 4*sd, 400)
    ax.plot(grid, [dnorm(g, mean=mean, sd=sd) for g in grid], lw=2.0, label="dnorm")
    ax.set_title(f"N({mean:g}, {sd:g}^2): sample vs density")
    ax.set_xlabel("x")
    ax.set_ylabel("Density")
    ax.legend()
    ax.grid(True, alpha=0.25)
    plt.tight_layout()

    # Q-Q plot against standard normal quantiles at (i + 0.5) / n
    n = len(xs)
    theoretical = qnorm((np.arange(n) + 0.5) / n)
    fig2, ax2 = plt.subplots(figsize=(6, 6))
    ax2.scatter(theoretical, np.sort(xs), s=4, alpha=0.6)
    ax2.plot(theoretical, mean + sd*theoretical, color="k", lw=1.0, label="y = mean + sd * x")
    ax2.set_title("Normal Q-Q plot")
    ax2.set_xlabel("Theoretical quantiles")
    ax2.set_ylabel("Sample quantiles")
    ax2.legend()
    ax2.grid(True, alpha=0.25)
    plt.tight_layout()

    plt.show()


if __name__ == "__main__":
    main()

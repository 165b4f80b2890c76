"""
Live matplotlib view of a tunneling run.

The animation drives the simulation itself: every frame advances the
state by `save_every` steps, so a saved video and the on-screen window
show the same run.

    top     |ψ(x)|² over the potential V(x) (barrier and absorbing ramps,
            right-hand axis); the absorbing margins are shaded
    bottom  ∫|ψ|² dx, transmitted and reflected probability vs. time
"""

import logging

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .evolver import step
from .observables import (
    peak_density,
    reflection_probability,
    total_probability,
    transmission_probability,
)

logger = logging.getLogger(__name__)

CYAN  = "#22d3ee"
SLATE = "#94a3b8"
AMBER = "#fbbf24"
ROSE  = "#f87171"
GREEN = "#4ade80"


class LivePlot:
    """Figure plus the per-frame update used by FuncAnimation."""

    def __init__(self, sim, n_frames, save_every):
        self.sim = sim
        self.n_frames = n_frames
        self.save_every = save_every
        self.times, self.norms, self.trans, self.refl = [], [], [], []

        p = sim.params
        x = sim.x
        self.fig, (self.ax_p, self.ax_h) = plt.subplots(
            2, 1, figsize=(11, 6.5), gridspec_kw={"height_ratios": [3, 1.4], "hspace": 0.3},
        )
        self.fig.patch.set_facecolor("#020617")
        for ax in (self.ax_p, self.ax_h):
            ax.set_facecolor("#020617")
            ax.tick_params(colors=SLATE)
            for spine in ax.spines.values():
                spine.set_color("#334155")

        # ── density over potential ───────────────────────
        ax = self.ax_p
        ax.set_xlim(x[0], x[-1])
        ax.set_ylim(0, peak_density(sim.state, floor=0.5) * 1.25)
        ax.set_ylabel(r"$|\psi(x)|^2$", color=CYAN)
        m = p.absorb_margin
        if m:
            ax.axvspan(x[0], x[m], color=ROSE, alpha=0.12, lw=0)
            ax.axvspan(x[-m], x[-1], color=ROSE, alpha=0.12, lw=0)

        self.ax_v = ax.twinx()
        V = sim.state.potential
        self.ax_v.fill_between(x, 0, np.clip(V, 0, None), color="white", alpha=0.12, lw=0)
        (self.line_v,) = self.ax_v.plot(x, V, color=AMBER, lw=0.8, alpha=0.7)
        v_lo, v_hi = min(V.min(), 0.0), max(V.max(), 1.0)
        self.ax_v.set_ylim(v_lo * 1.1, v_hi * 1.5)
        self.ax_v.set_ylabel("V(x)", color=AMBER)
        self.ax_v.tick_params(colors=SLATE)

        (self.line_prob,) = ax.plot(x, sim.density, color=CYAN, lw=1.6, zorder=3)
        self.label = ax.text(
            0.02, 0.90, "", transform=ax.transAxes,
            fontsize=10, color=SLATE, family="monospace",
        )

        # ── bookkeeping panel ────────────────────────────
        ax = self.ax_h
        ax.set_xlim(0, max(n_frames - 1, 1) * save_every * p.dt)
        ax.set_ylim(0, 1.05)
        ax.set_xlabel("t", color=SLATE)
        (self.line_norm,) = ax.plot([], [], color=SLATE, lw=1.2, label=r"$\int|\psi|^2dx$")
        (self.line_t,) = ax.plot([], [], color=GREEN, lw=1.2, label="transmitido")
        (self.line_r,) = ax.plot([], [], color=ROSE, lw=1.2, label="refletido")
        ax.legend(loc="center right", framealpha=0.3, facecolor="#222", labelcolor="white",
                  fontsize=8)

        self.fig.suptitle(
            f"Tunelamento quântico  |  E_cin = {p.kinetic_energy:.1f},  V₀ = {p.barrier_height:g}",
            color="white", fontsize=13,
        )

    @property
    def artists(self):
        return (self.line_prob, self.line_norm, self.line_t, self.line_r, self.label)

    def update(self, idx):
        """Frame idx: advance (except for the first frame), then redraw."""
        sim = self.sim
        if idx > 0:
            for _ in range(self.save_every):
                step(sim.state, sim.params)

        p = sim.params
        norm = total_probability(sim.state, p.dx)
        T = transmission_probability(sim.state, p)
        R = reflection_probability(sim.state, p)
        self.times.append(sim.time)
        self.norms.append(norm)
        self.trans.append(T)
        self.refl.append(R)

        self.line_prob.set_ydata(sim.density)
        self.line_norm.set_data(self.times, self.norms)
        self.line_t.set_data(self.times, self.trans)
        self.line_r.set_data(self.times, self.refl)
        self.label.set_text(
            f"t = {sim.time:.2f}   ∫|ψ|²dx = {norm:.4f}   T = {T:.3f}   R = {R:.3f}")
        return self.artists


def animate(sim, n_steps, save_every, save_path=None, show=True):
    """Run sim for n_steps while animating it; save to video or show."""
    n_frames = n_steps // save_every + 1
    plot = LivePlot(sim, n_frames, save_every)
    anim = FuncAnimation(
        plot.fig, plot.update, init_func=lambda: plot.artists,
        frames=n_frames, interval=30, blit=True, repeat=False,
    )

    if save_path:
        anim.save(save_path, fps=30, dpi=150,
                  savefig_kwargs={"facecolor": plot.fig.get_facecolor()})
        logger.info("Salvo: %s", save_path)
    elif show:
        plt.show()
    return anim, plot

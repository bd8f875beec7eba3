#!/usr/bin/env python3
"""
Orrery Example
==============

Headless run of the orrery core: plays a year at 10x, reverses, wraps
around the end of the date range and plots the inner planets' orbits.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime, timezone

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

import numpy as np

from orrery.core.config import create_default_config, create_headless_config
from orrery.core.simulator import Simulator
from orrery.dynamics.propagator import orbit_track


def run_playback():
    """Play forward, then backward, and print where the planets end up."""
    print("=" * 60)
    print("Orrery Playback")
    print("=" * 60)

    sim = Simulator(create_headless_config(rate_exponent=1.0))
    print(f"\nStart: {sim.get_display()}")

    sim.run(frames=37)
    print(f"After 37 frames at {sim.clock.speed_display()}: {sim.get_display()['calendar_date']}")

    sim.clock.toggle_direction()
    sim.run(frames=37)
    print(f"Reversed 37 frames: {sim.get_display()['calendar_date']}")

    print("\nHeliocentric positions (scene units):")
    for name, pos in sim.positions.items():
        print(f"  {name:8s} {np.array2string(pos, precision=3)}")

    print()
    print(sim.body_info('Earth'))


def run_wraparound():
    """Cross the upper bound of the date range."""
    print("\n" + "=" * 60)
    print("Date Range Wraparound")
    print("=" * 60)

    sim = Simulator(create_headless_config(rate_exponent=2.0))
    sim.clock.jump_to(datetime(2100, 12, 1, tzinfo=timezone.utc))

    for state in sim.run(frames=3):
        flag = " (wrapped)" if state.wrapped else ""
        print(f"  {state.instant.date()}  JD {state.julian_date:.2f}{flag}")


def plot_orbits(filename: str = "orbits.png"):
    """Plot the inner planets' orbit tracks and J2000 positions."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    sim = Simulator(create_default_config())
    scale = sim.config.spatial_scale

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(0, 0, 'o', color='gold', label='Sun')
    for name in ('Mercury', 'Venus', 'Earth', 'Mars'):
        body = sim.body(name)
        track = orbit_track(body.elements, scale)
        color = np.array(body.color) / 255.0
        ax.plot(track[:, 0], track[:, 1], color=color, lw=0.8)
        pos = sim.positions[name]
        ax.plot(pos[0], pos[1], 'o', color=color, label=name)

    ax.set_aspect('equal')
    ax.set_xlabel('x (scene units)')
    ax.set_ylabel('y (scene units)')
    ax.set_title(f"Inner planets at {sim.get_display()['calendar_date']}")
    ax.legend(loc='upper right')
    fig.savefig(filename, dpi=120)
    plt.close(fig)
    print(f"\nSaved {filename}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")
    run_playback()
    run_wraparound()
    plot_orbits()

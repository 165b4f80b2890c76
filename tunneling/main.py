"""
Tunelamento quântico 1D
=======================
Pacote de onda gaussiano incidindo em uma barreira retangular de potencial.
Resolve a equação de Schrödinger 1D dependente do tempo via Split-Step Fourier,
com bordas absorventes.

Unidades naturais: ℏ = 1, m = 1.

Uso:
    python -m tunneling                 # simula e anima (matplotlib)
    python -m tunneling --save out.mp4  # salva animação
    python -m tunneling --interactive   # janela interativa (pygame)
"""

import argparse
import logging
import sys

from .errors import SimulationError
from .logging_config import setup_logging
from .observables import reflection_probability, transmission_probability
from .params import SimulationParameters
from .simulation import Simulation

logger = logging.getLogger("tunneling.main")

N_STEPS    = 2000              # passos totais  (t_max = 4)
SAVE_EVERY = 8                 # 1 frame a cada 8 passos → 250 frames


def build_parser():
    d = SimulationParameters()
    parser = argparse.ArgumentParser(description="Tunelamento quântico 1D")

    grid = parser.add_argument_group("grade / tempo")
    grid.add_argument("--nx", type=int, default=d.nx, help="pontos (potência de 2)")
    grid.add_argument("--dx", type=float, default=d.dx)
    grid.add_argument("--dt", type=float, default=d.dt)
    grid.add_argument("--absorb-width", type=int, default=d.absorb_width,
                      help="largura da borda absorvente, em pontos (0 desliga)")

    packet = parser.add_argument_group("pacote / barreira")
    packet.add_argument("--k0", type=float, default=d.k0)
    packet.add_argument("--x0", type=float, default=d.x0)
    packet.add_argument("--sigma", type=float, default=d.sigma)
    packet.add_argument("--barrier-height", type=float, default=d.barrier_height)
    packet.add_argument("--barrier-width", type=float, default=d.barrier_width)
    packet.add_argument("--barrier-pos", type=float, default=d.barrier_pos)

    run = parser.add_argument_group("execução")
    run.add_argument("--steps", type=int, default=N_STEPS)
    run.add_argument("--save-every", type=int, default=SAVE_EVERY)
    run.add_argument("--speed", type=int, default=d.speed,
                     help="passos por quadro na janela interativa")
    run.add_argument("--interactive", action="store_true", help="abre a janela pygame")
    run.add_argument("--save", metavar="PATH", help="salva a animação (ex.: tunneling.mp4)")
    run.add_argument("--no-show", action="store_true", help="não abre a animação")
    run.add_argument("--log-level", default="INFO",
                     choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    run.add_argument("--log-file", default=None)
    return parser


def params_from_args(args):
    return SimulationParameters(
        nx=args.nx, dx=args.dx, dt=args.dt,
        k0=args.k0, x0=args.x0, sigma=args.sigma,
        barrier_height=args.barrier_height,
        barrier_width=args.barrier_width,
        barrier_pos=args.barrier_pos,
        absorb_width=args.absorb_width,
        speed=args.speed,
    )


def run_batch(params, n_steps, save_every, save_path=None, show=True):
    """Integrate n_steps (animated when saving or showing), then log a summary.

    When the window is closed early the summary is of the time reached.
    """
    sim = Simulation(params)

    E_kin = params.kinetic_energy
    regime = "tunelamento" if params.barrier_height > E_kin else "transmissão parcial"
    logger.info("E_cin = %.1f  |  V_barreira = %g  |  regime: %s",
                E_kin, params.barrier_height, regime)
    logger.info("Simulando %d passos (dt=%g, t_max=%.1f) ...",
                n_steps, params.dt, n_steps * params.dt)

    if save_path or show:
        from .visualize import animate
        animate(sim, n_steps, save_every, save_path=save_path, show=show)
    else:
        frames = sim.run(n_steps, save_every)
        logger.info("%d frames capturados.", len(frames))

    norm_final = sim.norm
    logger.info("t = %.2f  |  norma final: %.6f  (absorvido: %.2e)",
                sim.time, norm_final, 1 - norm_final)
    logger.info("Transmitido: %.4f  |  refletido: %.4f",
                transmission_probability(sim.state, params),
                reflection_probability(sim.state, params))
    return sim


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        params = params_from_args(args)
        if args.interactive:
            from .app import TunnelingApp
            TunnelingApp(params).run()
        else:
            run_batch(params, args.steps, args.save_every,
                      save_path=args.save, show=not args.no_show)
    except (SimulationError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

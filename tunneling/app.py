"""
Janela interativa — tunelamento quântico em tempo real.

Pacote de onda gaussiano contra uma barreira retangular; |ψ|² é desenhado
a cada quadro enquanto o integrador avança `speed` passos.

Controles:
    SPACE      Iniciar / pausar
    R          Resetar pacote
    ←/→        Passos por quadro (velocidade)
    Sliders    k₀, altura e largura da barreira
    ESC        Sair
"""

import logging

import numpy as np
import pygame

from .observables import peak_density
from .simulation import Simulation

logger = logging.getLogger(__name__)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Constants
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
W, H = 960, 720
CANVAS = pygame.Rect(20, 56, W - 40, 400)
FPS = 60
SPEED_RANGE = (0, 20)

BG        = (15, 23, 42)       # #0f172a
CANVAS_BG = (2, 6, 23)         # #020617
BORDER    = (51, 65, 85)       # #334155
ACCENT    = (34, 211, 238)     # #22d3ee
TEXT      = (203, 213, 225)    # #cbd5e1
TEXT_DIM  = (148, 163, 184)    # #94a3b8
GREEN     = (34, 197, 94)
RED       = (239, 68, 68)
GREY      = (71, 85, 105)
BARRIER   = (255, 255, 255, 38)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Widgets
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Slider:
    """Horizontal slider snapping to multiples of `step` above `mn`."""

    def __init__(self, x, y, w, mn, mx, step, val, label):
        self.rect = pygame.Rect(x, y, w, 5)
        self.min = mn
        self.max = mx
        self.step = step
        self.value = val
        self.label = label
        self.dragging = False

    def _snap(self, raw):
        n = round((raw - self.min) / self.step)
        return round(min(self.max, max(self.min, self.min + n * self.step)), 6)

    def handle(self, event):
        """Returns True when the value changed."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            hit = self.rect.inflate(16, 24)
            if hit.collidepoint(event.pos):
                self.dragging = True
                return self._drag_to(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            return self._drag_to(event.pos[0])
        return False

    def _drag_to(self, px):
        rel = max(0, min(px - self.rect.x, self.rect.width))
        new = self._snap(self.min + rel / self.rect.width * (self.max - self.min))
        if new == self.value:
            return False
        self.value = new
        return True

    def draw(self, surface, font):
        t = (self.value - self.min) / (self.max - self.min)
        pygame.draw.rect(surface, BORDER, self.rect, border_radius=2)
        hx = self.rect.x + int(t * self.rect.width)
        pygame.draw.circle(surface, ACCENT, (hx, self.rect.centery), 11)
        label_s = font.render(self.label, True, TEXT)
        val_s = font.render(f"{self.value:g}", True, ACCENT)
        surface.blit(label_s, (self.rect.x, self.rect.y - 26))
        surface.blit(val_s, (self.rect.right - val_s.get_width(), self.rect.y - 26))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# App
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TunnelingApp:
    TITLE = "Quantum Tunneling"

    def __init__(self, params=None):
        pygame.init()
        self.surface = pygame.display.set_mode((W, H))
        pygame.display.set_caption(self.TITLE)

        self.font_title = pygame.font.SysFont("monospace", 22, bold=True)
        self.font = pygame.font.SysFont("monospace", 15)

        self.sim = Simulation(params)
        self.playing = False
        self.pg_clock = pygame.time.Clock()

        p = self.sim.params
        col_w = (W - 80) // 3
        y = CANVAS.bottom + 150
        self.sliders = {
            "k0": Slider(20, y, col_w, 1, 15, 0.5, p.k0, "Particle Energy (k0)"),
            "barrier_height": Slider(40 + col_w, y, col_w, 0, 100, 5,
                                     p.barrier_height, "Barrier Height"),
            "barrier_width": Slider(60 + 2 * col_w, y, col_w, 0.5, 5, 0.1,
                                    p.barrier_width, "Barrier Width"),
        }
        half = (W - 60) // 2
        self.btn_play = pygame.Rect(20, CANVAS.bottom + 20, half, 48)
        self.btn_reset = pygame.Rect(40 + half, CANVAS.bottom + 20, half, 48)

    # ── actions ──────────────────────────────────────────
    def toggle(self):
        self.playing = not self.playing

    def reset(self):
        self.playing = False
        self.sim.reset()

    def change_speed(self, delta):
        lo, hi = SPEED_RANGE
        self.sim.update(speed=max(lo, min(hi, self.sim.params.speed + delta)))

    # ── event handling ───────────────────────────────────
    def _handle_events(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                return False
            if ev.type == pygame.KEYDOWN:
                if   ev.key == pygame.K_ESCAPE: return False
                elif ev.key == pygame.K_SPACE:  self.toggle()
                elif ev.key == pygame.K_r:      self.reset()
                elif ev.key == pygame.K_RIGHT:  self.change_speed(+1)
                elif ev.key == pygame.K_LEFT:   self.change_speed(-1)
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                if self.btn_play.collidepoint(ev.pos):
                    self.toggle()
                elif self.btn_reset.collidepoint(ev.pos):
                    self.reset()
            for name, slider in self.sliders.items():
                if slider.handle(ev):
                    self.sim.update(**{name: slider.value})
        return True

    # ── drawing ──────────────────────────────────────────
    def _draw_canvas(self):
        s = self.surface
        pygame.draw.rect(s, CANVAS_BG, CANVAS)
        p = self.sim.params
        nx = p.nx
        x0, w, h, bottom = CANVAS.x, CANVAS.width, CANVAS.height, CANVAS.bottom

        # barrier: positive part of V only
        V = self.sim.state.potential
        v_ref = p.barrier_height * 1.5 or 100
        layer = pygame.Surface(CANVAS.size, pygame.SRCALPHA)
        bar_w = max(1, int(w / nx + 1))
        for i in np.flatnonzero(V > 0):
            bh = int(min(V[i] / v_ref, 1.0) * h)
            layer.fill(BARRIER, pygame.Rect(int(i / nx * w), h - bh, bar_w, bh))
        s.blit(layer, CANVAS.topleft)

        prob = self.sim.density
        max_p = peak_density(self.sim.state, floor=0.5)
        xs = x0 + np.arange(nx) / nx * w
        ys = bottom - 10 - prob / max_p * (h * 0.8)
        ys = np.clip(ys, CANVAS.y, bottom)
        pygame.draw.aalines(s, ACCENT, False, list(zip(xs.tolist(), ys.tolist())))

        s.blit(self.font.render(f"Time: {self.sim.time:.2f}", True, TEXT_DIM),
               (x0 + 15, CANVAS.y + 12))
        norm_s = self.font.render(f"∫|ψ|²dx = {self.sim.norm:.4f}", True, TEXT_DIM)
        s.blit(norm_s, (CANVAS.right - norm_s.get_width() - 15, CANVAS.y + 12))
        pygame.draw.rect(s, BORDER, CANVAS, width=1, border_radius=8)

    def _button(self, rect, label, color):
        pygame.draw.rect(self.surface, color, rect, border_radius=8)
        txt = self.font_title.render(label, True, (255, 255, 255))
        self.surface.blit(txt, txt.get_rect(center=rect.center))

    def _render(self):
        s = self.surface
        s.fill(BG)
        title = self.font_title.render(self.TITLE, True, (255, 255, 255))
        s.blit(title, title.get_rect(midtop=(W // 2, 16)))
        self._draw_canvas()

        self._button(self.btn_play, "Pause" if self.playing else "Start",
                     RED if self.playing else GREEN)
        self._button(self.btn_reset, "Reset", GREY)
        for slider in self.sliders.values():
            slider.draw(s, self.font)

        hint = self.font.render(
            f"SPACE play/pause   R reset   ←/→ speed ({self.sim.params.speed} steps/frame)",
            True, TEXT_DIM)
        s.blit(hint, hint.get_rect(midbottom=(W // 2, H - 16)))
        pygame.display.flip()

    # ── main loop ────────────────────────────────────────
    def run(self):
        logger.info("Janela interativa aberta (%dx%d)", W, H)
        running = True
        while running:
            self.pg_clock.tick(FPS)
            running = self._handle_events()
            if self.playing:
                self.sim.advance()
            self._render()
        pygame.quit()

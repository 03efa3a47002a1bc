# visualizer.py
import pygame

# Color scheme
COLORS = {
    'background': (20, 20, 30),
    'panel': (40, 40, 50),
    'text': (220, 220, 220),
    'waiting': (100, 100, 100),
    'ready': (70, 130, 180),
    'running': (50, 205, 50),
    'finished': (147, 112, 219),
    'timeline_bg': (30, 30, 40),
    'grid': (60, 60, 70)
}


class PygameVisualizer:
    """
    Replays a finished scheduler's execution slices as an animated Gantt chart.
    One frame advances the playback clock by one time unit.
    """

    def __init__(self, scheduler, width=1200, height=700, fps=2):
        pygame.init()
        self.scheduler = scheduler
        self.report = scheduler.report()
        self.width = width
        self.height = height
        self.fps = fps

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Process Scheduler Visualization")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 18)
        self.font_large = pygame.font.Font(None, 32)

        self.running = True
        self.paused = False
        self.step_mode = False

        # playback position on the simulated clock
        self.now = 0
        self.end_time = max((s.end for s in self.report.slices), default=0)
        self.names = [row.name for row in self.report.rows]

    def draw_text(self, text, x, y, color=None, font=None):
        if color is None:
            color = COLORS['text']
        if font is None:
            font = self.font
        text_surface = font.render(str(text), True, color)
        self.screen.blit(text_surface, (x, y))

    def draw_panel(self, x, y, width, height, title):
        """Draw a panel with title"""
        pygame.draw.rect(self.screen, COLORS['panel'], (x, y, width, height))
        pygame.draw.rect(self.screen, COLORS['grid'], (x, y, width, height), 2)
        self.draw_text(title, x + 10, y + 5, font=self.font_small)

    def state_at(self, row, t):
        """Status of a process at playback time t"""
        if row.finish_time and t >= row.finish_time:
            return 'finished'
        for s in self.report.slices_for(row.name):
            if s.start <= t < s.end:
                return 'running'
        if t >= row.arrival_time:
            return 'ready'
        return 'waiting'

    def draw_timeline(self, x, y, width, height):
        """Draw one Gantt row per process up to the playback clock"""
        self.draw_panel(x, y, width, height, f"Execution Timeline - {self.report.title}")

        if self.end_time == 0:
            return

        timeline_y = y + 35
        bar_height = 22
        margin = 4
        unit = max(4, (width - 120) // self.end_time)

        for idx, row in enumerate(self.report.rows):
            py = timeline_y + idx * (bar_height + margin)
            if py + bar_height >= y + height - 30:
                break
            self.draw_text(f"{row.name}:", x + 10, py + 4, font=self.font_small)

            for t in range(min(self.now, self.end_time)):
                state = self.state_at(row, t)
                color = COLORS['running'] if state == 'running' else COLORS['timeline_bg']
                pygame.draw.rect(self.screen, color, (x + 80 + t * unit, py, unit - 1, bar_height))

        # Draw time markers
        marker_y = y + height - 22
        step = max(1, self.end_time // 10)
        for t in range(0, self.end_time + 1, step):
            self.draw_text(str(t), x + 80 + t * unit, marker_y, font=self.font_small)

    def draw_stats(self, x, y, width, height):
        """Draw playback statistics"""
        self.draw_panel(x, y, width, height, "Statistics")

        states = [self.state_at(row, self.now) for row in self.report.rows]
        stats = [
            f"Clock: {self.now} / {self.end_time}",
            f"Waiting: {states.count('waiting')}",
            f"Ready: {states.count('ready')}",
            f"Running: {states.count('running')}",
            f"Finished: {states.count('finished')}",
            f"Avg Turnaround: {self.report.average_turnaround:.2f}",
            f"Avg Weighted: {self.report.average_weighted_turnaround:.2f}",
        ]
        if self.report.quantum is not None:
            stats.append(f"Quantum: {self.report.quantum}")

        for i, stat in enumerate(stats):
            self.draw_text(stat, x + 10, y + 30 + i * 25, font=self.font_small)

    def draw_legend(self, x, y):
        """Draw color legend"""
        legend_items = [
            ('Not Arrived', 'waiting'),
            ('Ready', 'ready'),
            ('Running (CPU)', 'running'),
            ('Finished', 'finished'),
        ]
        box_size = 15
        for i, (label, color_key) in enumerate(legend_items):
            ly = y + i * 25
            pygame.draw.rect(self.screen, COLORS[color_key], (x, ly, box_size, box_size))
            pygame.draw.rect(self.screen, COLORS['text'], (x, ly, box_size, box_size), 1)
            self.draw_text(label, x + box_size + 5, ly, font=self.font_small)

    def draw_controls(self, x, y):
        """Draw control instructions"""
        controls = [
            "SPACE: Pause/Resume",
            "S: Step Forward",
            "UP/DOWN: Speed",
            "Q/ESC: Quit",
            f"Speed: {self.fps} FPS"
        ]
        for i, control in enumerate(controls):
            self.draw_text(control, x, y + i * 20, font=self.font_small)

    def draw_process_boxes(self, x, y):
        """One colored box per process showing its state at the playback clock"""
        box_width = 70
        box_height = 40
        margin = 10
        for i, row in enumerate(self.report.rows):
            px = x + (i % 8) * (box_width + margin)
            py = y + (i // 8) * (box_height + margin)
            color = COLORS[self.state_at(row, self.now)]
            pygame.draw.rect(self.screen, color, (px, py, box_width, box_height))
            pygame.draw.rect(self.screen, COLORS['text'], (px, py, box_width, box_height), 1)
            text_surface = self.font_small.render(row.name, True, COLORS['text'])
            self.screen.blit(text_surface, text_surface.get_rect(center=(px + box_width // 2, py + box_height // 2)))

    def draw_frame(self):
        """Draw a single frame"""
        self.screen.fill(COLORS['background'])
        margin = 20
        stats_width = 250
        stats_x = self.width - stats_width - margin

        self.draw_process_boxes(margin, 60)
        self.draw_stats(stats_x, margin, stats_width, 240)
        self.draw_legend(stats_x, margin + 260)
        self.draw_controls(stats_x, margin + 380)

        timeline_height = 300
        self.draw_timeline(margin, self.height - timeline_height - margin,
                           self.width - 2 * margin, timeline_height)

        title = f"Process Scheduler Simulation - {self.scheduler.__class__.__name__}"
        if self.paused:
            title += " [PAUSED]"
        self.draw_text(title, margin, 15, font=self.font_large)
        pygame.display.flip()

    def handle_events(self):
        """Handle pygame events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_s:
                    self.step_mode = True
                elif event.key in (pygame.K_q, pygame.K_ESCAPE):
                    self.running = False
                elif event.key == pygame.K_UP:
                    self.fps = min(60, self.fps + 1)
                elif event.key == pygame.K_DOWN:
                    self.fps = max(1, self.fps - 1)

    def run_simulation(self):
        """Play back the run, then wait on the final frame until the user quits"""
        while self.running:
            self.handle_events()

            if self.now < self.end_time and (not self.paused or self.step_mode):
                self.now += 1
                self.step_mode = False

            self.draw_frame()
            if self.now >= self.end_time:
                text_surface = self.font_large.render("SIMULATION COMPLETE - Press Q to exit", True, COLORS['running'])
                self.screen.blit(text_surface, text_surface.get_rect(center=(self.width // 2, self.height // 2)))
                pygame.display.flip()
            self.clock.tick(self.fps)

        pygame.quit()


def run_pygame_visualization(scheduler, fps=2):
    """
    Run pygame visualization of a finished scheduler

    Args:
        scheduler: scheduler instance whose run() has completed
        fps: Frames per second (playback speed)
    """
    visualizer = PygameVisualizer(scheduler, fps=fps)
    visualizer.run_simulation()

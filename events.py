class ReplacementObserver:
    """Receives the engine's events. ``step`` is the 1-based reference number."""

    def on_hit(self, step, page, frame):
        pass

    def on_fault(self, step, page):
        pass

    def on_loaded(self, step, page, frame, free_frames):
        pass

    def on_swap_out(self, step, page, frame):
        pass

    def on_evicted_and_loaded(self, step, victim_page, page, frame):
        pass

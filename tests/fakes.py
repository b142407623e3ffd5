# tests/fakes.py
"""Recording stand-ins for the player and renderer the controller talks to."""


class FakePlayer:
    def __init__(self, time=0.0, paused=False):
        self.time = time
        self.paused = paused
        self.seeks = []

    def get_video_time(self):
        return self.time

    def seek_to(self, seconds):
        self.seeks.append(seconds)
        self.time = seconds

    def is_paused(self):
        return self.paused


class FakeRenderer:
    def __init__(self):
        self.calls = []

    def show(self, annotation_id, annotation):
        self.calls.append(("show", annotation_id))

    def hide(self, annotation_id, annotation):
        self.calls.append(("hide", annotation_id))

    def navigate(self, url):
        self.calls.append(("navigate", url))

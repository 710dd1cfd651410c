import enlighten

def iterate(iterable, desc=None):
    return Progress(iterable, desc)

class Progress:
    """Progress bar that advances as the wrapped iterable is consumed"""

    def __init__(self, iterable, desc=None):
        try:
            total = len(iterable)
        except (TypeError, AttributeError):
            total = None

        self.iterable = iterable
        self.manager = enlighten.get_manager()
        self.pbar = self.manager.counter(total=total, desc=desc, leave=False)

    def __iter__(self):
        try:
            for item in self.iterable:
                yield item
                self.pbar.update()
        finally:
            self.manager.stop()

class RunSettings:
    verbose: bool
    max_steps: int | None

    def __init__(self):
        self.verbose = False
        self.max_steps = None   # Unbounded

    def update(
        self,
        verbose: bool | None = None,
        max_steps: int | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if max_steps is not None:
            self.max_steps = max_steps

        return self

from .logger_stream import LoggerStream


class LoggerContext:
    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
        nested: bool = False,
    ) -> None:
        self.name = name
        self.template = template
        self.filename = filename
        self.directory = directory
        self.nested = nested
        self.stream = LoggerStream(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
        )

    def __enter__(self) -> LoggerStream:
        self.stream.set_defaults(
            template=self.template,
            filename=self.filename,
            directory=self.directory,
        )

        if self.filename:
            self.stream.open_file(
                self.filename,
                directory=self.directory,
            )

        return self.stream

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.nested is False:
            self.stream.close()

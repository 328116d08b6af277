LOGIN_LINK = "<a href=/login>Login</a>"


class StaticModule:
    def __init__(self, content: str, name: str | None = None):
        self.content = content
        if name is not None:
            self.name = name
        self.calls = 0

    def execute(self) -> str:
        self.calls += 1
        return self.content


class FailingModule:
    name = "TwitterLogin"

    def __init__(self, error: Exception):
        self.error = error

    def execute(self) -> str:
        raise self.error

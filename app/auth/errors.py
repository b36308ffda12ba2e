class AuthenticationError(Exception):
    def __init__(self, *args):
        args = args or ("Invalid credentials",)
        super().__init__(*args)

"""Exceptions raised by the installer."""


class InstallerError(Exception):
    """A provisioning step could not be completed."""


class UserAbort(InstallerError):
    """The operator declined to continue; nothing was changed."""

    def __init__(self, message: str = "Exiting the script. No changes made."):
        super().__init__(message)


class UnknownUserError(InstallerError):
    def __init__(self, user: str):
        super().__init__(f"User {user} does not exist on this host.")
        self.user = user


class ProvisionError(InstallerError):
    """The pyinfra run exited non-zero."""

class SvcsError(Exception):
    pass


class NotFoundError(SvcsError):
    """A referenced path or snapshot id does not exist."""


class PreconditionError(SvcsError):
    pass


class IOFailure(SvcsError):
    """A file could not be read or written while copying or persisting."""


class SnapshotExistsError(SvcsError):
    pass


class CorruptLogError(SvcsError):
    pass


class HashAlgorithmError(SvcsError):
    pass

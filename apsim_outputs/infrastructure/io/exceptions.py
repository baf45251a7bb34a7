from ...domain.exceptions import ApsimOutputsError


class DataSourceError(ApsimOutputsError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass

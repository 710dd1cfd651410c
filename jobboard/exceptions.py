class JobBoardException(Exception):
    """ Base class for job board errors. """

class VotingPeriodError(JobBoardException):
    """ A voting period operation would break a period invariant. """

class RecordNotFound(JobBoardException):
    """ No record with the requested id exists in the collection. """

class DuplicateRecordError(JobBoardException):
    """ A record with the same identifying field already exists. """

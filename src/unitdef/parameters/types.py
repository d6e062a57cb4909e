"""Typed values produced by the parameter decoders."""

from enum import Enum
from typing import Annotated
from typing import Literal as TypingLiteral

from pydantic import BaseModel, ConfigDict, Field

from ..errors import DecodeError


class _CodedEnum(Enum):
    """Enum whose values are the codes used in definition files."""

    @classmethod
    def from_code(cls, code: str):
        for member in cls:
            if member.value == code:
                return member
        raise DecodeError(f"unknown {cls.__name__} code: {code!r}")


class UnitType(_CodedEnum):
    JOBGROUP = "g"
    MANAGER_JOBGROUP = "mg"
    JOBNET = "n"
    RECOVERY_JOBNET = "rn"
    REMOTE_JOBNET = "rm"
    RECOVERY_REMOTE_JOBNET = "rr"
    MANAGER_JOBNET = "mn"
    START_CONDITION = "rc"
    JOBNET_CONNECTOR = "nc"
    UNIX_JOB = "j"
    RECOVERY_UNIX_JOB = "rj"
    PC_JOB = "pj"
    RECOVERY_PC_JOB = "rp"
    QUEUE_JOB = "qj"
    RECOVERY_QUEUE_JOB = "rq"
    JUDGMENT_JOB = "jdj"
    RECOVERY_JUDGMENT_JOB = "rjdj"
    OR_JOB = "orj"
    RECOVERY_OR_JOB = "rorj"
    JP1_EVENT_RECEPTION_MONITORING_JOB = "evwj"
    RECOVERY_JP1_EVENT_RECEPTION_MONITORING_JOB = "revwj"
    FILE_MONITORING_JOB = "flwj"
    RECOVERY_FILE_MONITORING_JOB = "rflwj"
    EMAIL_RECEPTION_MONITORING_JOB = "mlwj"
    RECOVERY_EMAIL_RECEPTION_MONITORING_JOB = "rmlwj"
    MESSAGE_QUEUE_RECEPTION_MONITORING_JOB = "mqwj"
    RECOVERY_MESSAGE_QUEUE_RECEPTION_MONITORING_JOB = "rmqwj"
    MSMQ_RECEPTION_MONITORING_JOB = "mswj"
    RECOVERY_MSMQ_RECEPTION_MONITORING_JOB = "rmswj"
    LOG_FILE_MONITORING_JOB = "lfwj"
    RECOVERY_LOG_FILE_MONITORING_JOB = "rlfwj"
    WINDOWS_EVENT_LOG_MONITORING_JOB = "ntwj"
    RECOVERY_WINDOWS_EVENT_LOG_MONITORING_JOB = "rntwj"
    EXECUTION_INTERVAL_CONTROL_JOB = "tmwj"
    RECOVERY_EXECUTION_INTERVAL_CONTROL_JOB = "rtmwj"
    JP1_EVENT_SENDING_JOB = "evsj"
    RECOVERY_JP1_EVENT_SENDING_JOB = "revsj"
    EMAIL_SENDING_JOB = "mlsj"
    RECOVERY_EMAIL_SENDING_JOB = "rmlsj"
    MESSAGE_QUEUE_SENDING_JOB = "mqsj"
    RECOVERY_MESSAGE_QUEUE_SENDING_JOB = "rmqsj"
    MSMQ_SENDING_JOB = "mssj"
    RECOVERY_MSMQ_SENDING_JOB = "rmssj"
    OPENVIEW_STATUS_REPORT_JOB = "cmsj"
    RECOVERY_OPENVIEW_STATUS_REPORT_JOB = "rcmsj"
    LOCAL_POWER_CONTROL_JOB = "pwlj"
    RECOVERY_LOCAL_POWER_CONTROL_JOB = "rpwlj"
    REMOTE_POWER_CONTROL_JOB = "pwrj"
    RECOVERY_REMOTE_POWER_CONTROL_JOB = "rpwrj"
    CUSTOM_UNIX_JOB = "cj"
    RECOVERY_CUSTOM_UNIX_JOB = "rcj"
    CUSTOM_PC_JOB = "cpj"
    RECOVERY_CUSTOM_PC_JOB = "rcpj"

    @property
    def recovery(self) -> bool:
        return self.name.startswith("RECOVERY_")

    @property
    def container(self) -> bool:
        """Whether units of this type hold sub-units."""
        return self in _CONTAINER_TYPES


_CONTAINER_TYPES = frozenset(
    {
        UnitType.JOBGROUP,
        UnitType.MANAGER_JOBGROUP,
        UnitType.JOBNET,
        UnitType.RECOVERY_JOBNET,
        UnitType.REMOTE_JOBNET,
        UnitType.RECOVERY_REMOTE_JOBNET,
        UnitType.MANAGER_JOBNET,
        UnitType.START_CONDITION,
    }
)


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True)


# el / sz
class Element(_Value):
    """Icon position of a sub-unit inside its jobnet's map."""

    unit_name: str
    unit_type: UnitType
    h_pixel: int
    v_pixel: int

    @property
    def x_coord(self) -> int:
        # H = 80 + 160x; job groups and start conditions sit at 0
        return max(0, (self.h_pixel - 80) // 160)

    @property
    def y_coord(self) -> int:
        # V = 48 + 96y
        return max(0, (self.v_pixel - 48) // 96)


class MapSize(_Value):
    width: int
    height: int


# ar
class ConnectionType(_CodedEnum):
    SEQUENTIAL = "seq"
    CONDITIONAL = "con"


class Relation(_Value):
    """An arrow between two sibling units."""

    from_unit: str
    to_unit: str
    connection: ConnectionType = ConnectionType.SEQUENTIAL


# sd
class DesignationMethod(Enum):
    SCHEDULED_DATE = "scheduled"
    ENTRY_DATE = "en"
    UNDEFINED = "ud"


class CountingMethod(Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "+"
    BUSINESS_DAY = "*"
    NON_BUSINESS_DAY = "@"


class DayOfWeek(_CodedEnum):
    SUNDAY = "su"
    MONDAY = "mo"
    TUESDAY = "tu"
    WEDNESDAY = "we"
    THURSDAY = "th"
    FRIDAY = "fr"
    SATURDAY = "sa"


class DayOfMonth(_Value):
    """Numeric day. With ``backward`` the day counts back from month end;
    ``day`` None then means the last day itself."""

    kind: TypingLiteral["day_of_month"] = "day_of_month"
    counting: CountingMethod = CountingMethod.ABSOLUTE
    day: int | None
    backward: bool = False


class DayOfWeekRule(_Value):
    """Weekday, optionally in week ``week`` (0-9) or the last week."""

    kind: TypingLiteral["day_of_week"] = "day_of_week"
    day_of_week: DayOfWeek
    relative: bool = False
    week: int | None = None
    last_week: bool = False


class StartDate(_Value):
    rule_number: int = 1
    designation: DesignationMethod = DesignationMethod.SCHEDULED_DATE
    year: int | None = None
    month: int | None = None
    day: Annotated[DayOfMonth | DayOfWeekRule, Field(discriminator="kind")] | None = None


# st / sy / ey
class Time(_Value):
    hours: int
    minutes: int

    @classmethod
    def of_minutes(cls, total: int) -> "Time":
        return cls(hours=total // 60, minutes=total % 60)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes


class StartTime(_Value):
    rule_number: int = 1
    relative: bool = False
    time: Time


class TimingMethod(Enum):
    ABSOLUTE = "absolute"
    RELATIVE_TO_ROOT_START = "M"
    RELATIVE_TO_SUPERIOR_START = "U"
    RELATIVE_TO_OWN_START = "C"


class DelayTime(_Value):
    rule_number: int = 1
    timing: TimingMethod
    time: Time


# mladr
class AddressType(_CodedEnum):
    TO = "TO"
    CC = "CC"
    BCC = "BCC"


class MailAddress(_Value):
    address_type: AddressType
    address: str


# single-code parameters
class ExecutionUserType(_CodedEnum):
    DEFINITION_USER = "def"
    ENTRY_USER = "ent"


class ResultJudgmentType(_CodedEnum):
    ALWAYS_NORMAL = "nm"
    ALWAYS_ABNORMAL = "ab"
    EXIT_CODE = "cod"
    MANUAL = "mnu"
    FILE = "fle"


DEFAULT_RESULT_JUDGMENT = ResultJudgmentType.EXIT_CODE


class HoldType(_CodedEnum):
    YES = "y"
    IF_PREVIOUS_WARNING = "w"
    IF_PREVIOUS_ABNORMAL = "a"
    NO = "n"


class WriteOption(_CodedEnum):
    NEW = "new"
    ADD = "add"


class DeleteOption(_CodedEnum):
    SAVE = "sav"
    DELETE = "del"


class EvaluateConditionType(_CodedEnum):
    GREATER_THAN = "gt"
    GREATER_OR_EQUAL = "ge"
    LESS_THAN = "lt"
    LESS_OR_EQUAL = "le"
    EQUAL = "eq"
    NOT_EQUAL = "ne"
    FILE_EXISTS = "ef"
    FILE_NOT_EXISTS = "nf"


# ncs
class SyncOption(Enum):
    """Ordering mode of a jobnet connector; only meaningful when ``ncl=y``."""

    SYNC = "sync"
    ASYNC = "async"


# env
class EnvironmentVariable(_Value):
    name: str
    value: str

from student_manage.models.assignment import Assignment  # noqa: F401
from student_manage.models.sequence import Sequence  # noqa: F401
from student_manage.models.user import User  # noqa: F401

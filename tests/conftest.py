"""Shared fixtures."""

import pytest

JOBNET = """\
unit=ROOT,,jp1admin,;
{
\tty=n;
\tsd=1,10/05;
\tst=1,+08:30;
\tel=JOB1,j,+240 +96;
\tel=NET1,n,+400 +96;
\tar=(f=JOB1,t=NET1);
\tcm="root #"jobnet#" comment";
\tunit=JOB1,,,;
\t{
\t\tty=j;
\t\tsc=/bin/true;
\t}
\tunit=NET1,,,;
\t{
\t\tty=n;
\t\tunit=JOB2,,,;
\t\t{
\t\t\tty=j;
\t\t}
\t}
}
"""


@pytest.fixture
def jobnet():
    """A root jobnet with a job, a nested jobnet and a few typed parameters."""
    return JOBNET

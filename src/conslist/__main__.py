from conslist.demo import main
from conslist.utils import setup_logging

setup_logging(
    "conslist",
    time=False,
    stream="ext://sys.stderr",
)
main()

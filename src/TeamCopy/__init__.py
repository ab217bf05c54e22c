"""Copy a Hudson team and its jobs into a new team"""

__version__ = "0.0.1"
import argparse

from TeamCopy.baseApp import ConfigError
from TeamCopy.copyTeam import CopyError, CopyTeam


def copyteam(argv=None):
    parser = argparse.ArgumentParser(
        description="Copy a team and its jobs to a newly created team"
    )
    parser.add_argument("FROM", help="Team name to copy (required)")
    parser.add_argument("TO", help="Team name to create (required)")
    parser.add_argument(
        "EMAIL",
        nargs="?",
        default=None,
        help="Email recipients separated by commas (optional); if not specified, recipients will be removed",
    )
    parser.add_argument(
        "-a",
        "--act",
        help="actually copy the team, without -a copyteam only shows what would be changed",
        action="store_true",
    )
    parser.add_argument(
        "-c",
        "--conf",
        default="copyteam.toml",
        help="load config file (default: copyteam.toml)",
    )
    parser.add_argument(
        "-n",
        "--nodes",
        help="MOVE (move nodes to new team), VISIBLE (make nodes visible to new team), IGNORE (ignore nodes - default)",
    )
    parser.add_argument(
        "-V",
        "--views",
        help="MOVE (move views to new team), VISIBLE (make views visible to new team), IGNORE (ignore views - default)",
    )
    parser.add_argument(
        "-v",
        "--version",
        help="show program's version",
        action="version",
        version=__version__,
    )
    args = parser.parse_args(argv)

    try:
        c = CopyTeam(
            act=args.act,
            conf_fn=args.conf,
            from_team=args.FROM,
            to_team=args.TO,
            email=args.EMAIL,
            nodes=args.nodes,
            views=args.views,
        )
        print("Copying...")
        c.copy()
    except (ConfigError, CopyError) as e:
        raise SystemExit(str(e))

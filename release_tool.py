#!/usr/bin/env python3
"""
Release tooling for Deis components:
- changelog: categorized changelog between two releases of one or more repositories
- params e2e: e2e test parameters block for a given image org, tag and pull policy
"""

import argparse
import logging
import sys

from deisrel.changelog.domain.entities import Changelog
from deisrel.changelog.repositories.factory import (
    create_comparison_repository,
    default_owner,
)
from deisrel.changelog.services.changelog_service import ChangelogService
from deisrel.changelog.services.render_service import render_changelog
from deisrel.notifications.repositories.factory import create_slack_repository
from deisrel.notifications.services.notification_service import NotificationService
from deisrel.params.domain.value_objects import E2EParams, PullPolicy
from deisrel.params.services.params_service import render_e2e_params


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    # options accepted after every leaf subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        prog="deisrel",
        description="Generate changelogs and deployment parameters for Deis releases",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    changelog_parser = subparsers.add_parser(
        "changelog",
        parents=[common],
        help="Generate a changelog between two releases",
    )
    changelog_parser.add_argument("old_release", type=str, help="Old release (tag or commit)")
    changelog_parser.add_argument("new_release", type=str, help="New release (tag or commit)")
    changelog_parser.add_argument(
        "--owner",
        type=str,
        default=None,
        help="Repository owner (default: $DEISREL_GITHUB_OWNER or 'deis')",
    )
    changelog_parser.add_argument(
        "--repo",
        dest="repos",
        action="append",
        required=True,
        help="Repository name. May be given several times",
    )
    changelog_parser.add_argument(
        "--send-to-slack",
        action="store_true",
        help="Post the changelog to a Slack channel",
    )
    changelog_parser.add_argument(
        "--slack-channel",
        type=str,
        help="Slack channel name (required if --send-to-slack is set)",
    )

    params_parser = subparsers.add_parser("params", help="Render deployment parameters")
    params_subparsers = params_parser.add_subparsers(dest="params_command", required=True)
    e2e_parser = params_subparsers.add_parser(
        "e2e", parents=[common], help="Render e2e test parameters"
    )
    e2e_parser.add_argument("--org", type=str, default="deis", help="Docker org (default: deis)")
    e2e_parser.add_argument("--tag", type=str, default="canary", help="Docker tag (default: canary)")
    e2e_parser.add_argument(
        "--pull-policy",
        type=str,
        choices=[policy.value for policy in PullPolicy],
        default=PullPolicy.ALWAYS.value,
        help="Image pull policy (default: Always)",
    )

    return parser


def run_changelog(args: argparse.Namespace) -> None:
    """Generate, print and optionally post the changelog for every requested repository."""
    if args.send_to_slack and not args.slack_channel:
        print(
            "✗ Error: --slack-channel is required when --send-to-slack is set",
            file=sys.stderr,
        )
        sys.exit(1)

    owner = args.owner or default_owner()
    rendered: list[str] = []

    try:
        with create_comparison_repository() as comparison_repository:
            changelog_service = ChangelogService(comparison_repository)
            for repo in args.repos:
                changelog = Changelog(
                    old_release=args.old_release,
                    new_release=args.new_release,
                )
                changelog_service.generate(owner, repo, changelog)
                rendered.append(f"## {owner}/{repo}\n\n{render_changelog(changelog)}")
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except RuntimeError as e:
        print(f"✗ Failed to generate changelog: {e}", file=sys.stderr)
        sys.exit(1)

    text = "\n".join(rendered)
    print(text, end="")

    if args.send_to_slack:
        try:
            notification_service = NotificationService(create_slack_repository())
            channel = notification_service.send_changelog_to_slack(
                changelog_text=text,
                channel_name=args.slack_channel,
                title=f"Changelog {args.old_release} -> {args.new_release}",
            )
        except ValueError as e:
            print(f"✗ Configuration error: {e}", file=sys.stderr)
            print("  Hint: Set SLACK_TOKEN in .env file or environment", file=sys.stderr)
            sys.exit(1)
        except RuntimeError as e:
            print(f"✗ Failed to send to Slack: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"✓ Changelog sent to {channel.mention}", file=sys.stderr)


def run_params_e2e(args: argparse.Namespace) -> None:
    """Print the e2e parameters block."""
    params = E2EParams(org=args.org, tag=args.tag, pull_policy=args.pull_policy)
    print(render_e2e_params(params), end="")


def main(argv: list[str] | None = None) -> None:
    """Main function to parse arguments and dispatch the subcommand."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.command == "changelog":
        run_changelog(args)
    else:
        run_params_e2e(args)

    sys.exit(0)


if __name__ == "__main__":
    main()

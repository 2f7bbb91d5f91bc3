"""
evelib Map Commands

XML API map statistics: jumps, kills, sovereignty and faction warfare
systems. Results can be narrowed to specific solar systems.
"""

import argparse
from typing import Callable

from ..clients.xmlapi import Map
from ..models.xmlapi import XmlApiResource
from .common import format_api_time, run_command


def _render(args: argparse.Namespace) -> Callable[[XmlApiResource], dict]:
    wanted = set(args.systems or [])

    def render(resource: XmlApiResource) -> dict:
        rows = [
            row.model_dump(mode="json")
            for row in resource.solar_systems
            if not wanted or row.solar_system_id in wanted
        ]
        return {
            "current_time": format_api_time(resource.current_time),
            "cached_until": format_api_time(resource.cached_until),
            "data_time": format_api_time(resource.data_time),
            "system_count": len(rows),
            "systems": rows,
        }

    return render


def cmd_jumps(args: argparse.Namespace) -> dict:
    """Ship jumps per system."""
    return run_command(Map().get_jumps, _render(args))


def cmd_kills(args: argparse.Namespace) -> dict:
    """Kills per system."""
    return run_command(Map().get_kills, _render(args))


def cmd_sovereignty(args: argparse.Namespace) -> dict:
    """Sovereignty holder per system."""
    return run_command(Map().get_sovereignty, _render(args))


def cmd_fw_systems(args: argparse.Namespace) -> dict:
    """Faction warfare occupancy per system."""
    return run_command(Map().get_faction_war_systems, _render(args))


def register_parsers(subparsers: argparse._SubParsersAction) -> None:
    """Register map command parsers."""

    commands = (
        ("jumps", "Ship jumps per system (last hour)", cmd_jumps),
        ("kills", "Ship/pod/NPC kills per system (last hour)", cmd_kills),
        ("sovereignty", "Sovereignty per system", cmd_sovereignty),
        ("fw-systems", "Faction warfare systems", cmd_fw_systems),
    )
    for name, help_text, func in commands:
        parser = subparsers.add_parser(name, help=help_text)
        parser.add_argument(
            "systems", type=int, nargs="*", help="Only show these solar system IDs"
        )
        parser.set_defaults(func=func)

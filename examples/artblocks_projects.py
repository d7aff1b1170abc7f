#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from artblocks.subgraph import ArtBlocksSubgraphClient, Empty, Failure, Success


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Query Art Blocks project metadata")
    p.add_argument("project_id", nargs="?", type=int, default=0)
    p.add_argument("--contract", default=None, help="Query this contract directly")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    async with ArtBlocksSubgraphClient() as client:
        count = await client.count_all_projects()
        print("Total projects:", count.value if isinstance(count, Success) else "unavailable")

        outcome = await client.get_project_by_id(args.project_id, args.contract)
        if isinstance(outcome, Success):
            p = outcome.value
            print(f"#{p.project_id} {p.name} | {p.invocations}/{p.max_invocations} | {p.curation_status}")
            if p.is_complete:
                print("Fully minted")
            else:
                print(f"{p.remaining_invocations} mints remaining")
        elif isinstance(outcome, Empty):
            print(f"Project {args.project_id} not found")
        elif isinstance(outcome, Failure):
            print(f"Lookup failed: {outcome.error}")

        factory = await client.get_all_factory_projects()
        if isinstance(factory, Success):
            print("Factory projects:", len(factory.value))


if __name__ == "__main__":
    asyncio.run(main())

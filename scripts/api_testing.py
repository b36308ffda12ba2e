# This script runs e2e API testing against a locally running member search API
# Instructions:
# - Start the server: member-search http-api
# - Run this script: python scripts/api_testing.py -b A -b B

import argparse
import asyncio
import json

import aiohttp

BASE_URL = "http://localhost:5000"
USERNAME = "admin"
PASSWORD = "password"


async def fetch_token(session: aiohttp.ClientSession) -> str:
    async with session.post(
        "/auth/token", json={"username": USERNAME, "password": PASSWORD}
    ) as response:
        response.raise_for_status()
        return (await response.json())["token"]


async def search_members(base_url: str, params: list):
    async with aiohttp.ClientSession(base_url=base_url) as session:
        token = await fetch_token(session)
        async with session.get(
            "/api/members",
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        ) as response:
            print(f"{response.status} {response.reason}")
            print(json.dumps(await response.json(), indent=2))


def main():
    parser = argparse.ArgumentParser(description="Query the member search API.")
    parser.add_argument("-u", "--url", default=BASE_URL)
    parser.add_argument("-b", "--benefit", action="append", default=[])
    parser.add_argument("--current-benefit")
    parser.add_argument("--dual-eligible", choices=("true", "false"))
    parser.add_argument("--veteran", choices=("true", "false"))
    parser.add_argument("--has-coverage", choices=("true", "false"))
    parser.add_argument("-l", "--limit", default="10")
    parser.add_argument("-p", "--page", default="1")
    args = parser.parse_args()

    params = [("limit", args.limit), ("page", args.page)]
    params.extend(("benefitList", benefit) for benefit in args.benefit)
    optional = {
        "isCurrentCovWithBenefit": args.current_benefit,
        "isDualEligible": args.dual_eligible,
        "veteranStatus": args.veteran,
        "isCov": args.has_coverage,
    }
    params.extend((key, value) for key, value in optional.items() if value)

    asyncio.run(search_members(args.url, params))


if __name__ == "__main__":
    main()

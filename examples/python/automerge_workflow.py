#!/usr/bin/env python3
"""
azdo - Plan, apply and automerge workflow example

This example walks an open pull request through the steps an automation
engine performs:
1. List the files the pull request modifies
2. Post a plan comment and a pending status
3. Check approval and mergeability
4. Merge the pull request

Environment:
    AZDO_TOKEN, AZDO_HOSTNAME, AZDO_USER_GUID, AZDO_BOT_NAME
    AZDO_REPO: repository full name, e.g. "org/project/repo"
    AZDO_PULL: pull request number
    AZDO_MERGE=1 to actually merge
"""

import logging
import os
import sys
from pathlib import Path

# Add SDK to path for development
sdk_path = Path(__file__).parent.parent.parent / "sdk" / "python"
sys.path.insert(0, str(sdk_path))

from azdo import AzureDevopsVCSClient, CommitStatus, PullRequest, Repo
from azdo.exceptions import APIError, AzureDevopsError, PreconditionError
from azdo.logging import configure_logging


def main() -> None:
    """Run the automerge workflow example."""
    print("=== azdo automerge example ===\n")

    configure_logging(level=logging.INFO, identity_level=logging.DEBUG)

    repo = Repo(full_name=os.environ["AZDO_REPO"])
    num = int(os.environ["AZDO_PULL"])

    with AzureDevopsVCSClient.from_env() as vcs:
        details = vcs.get_pull_request(repo, num)
        pull = PullRequest(
            num=num,
            head_commit=details.last_merge_source_commit,
            base_repo=repo,
        )
        print(f"Pull request {vcs.markdown_pull_link(pull)}: {details.title}")

        # Step 1: modified files
        print("\n1. Listing modified files...")
        files = vcs.list_modified_files(repo, pull)
        for name in files:
            print(f"   {name}")

        # Step 2: comment and status
        print("\n2. Posting plan comment and status...")
        vcs.update_status(repo, pull, CommitStatus.PENDING, "atlantis/plan", "Plan in progress...")
        vcs.create_comment(repo, num, f"Ran Plan for {len(files)} modified file(s)", command="plan")
        vcs.update_status(repo, pull, CommitStatus.SUCCESS, "atlantis/plan", "Plan succeeded.")
        print(f"   User identity: {vcs.identity.get()}")

        # Step 3: approval and mergeability
        print("\n3. Checking approval and mergeability...")
        approved = vcs.pull_is_approved(repo, pull)
        mergeable = vcs.pull_is_mergeable(repo, pull)
        print(f"   approved={approved} mergeable={mergeable}")

        # Step 4: merge
        if approved and mergeable and os.environ.get("AZDO_MERGE") == "1":
            print("\n4. Merging...")
            try:
                vcs.merge_pull(pull)
                print("   Merged")
            except PreconditionError as e:
                print(f"   Not merged: {e.message}")

    print("\n=== Example completed ===")


if __name__ == "__main__":
    try:
        main()
    except APIError as e:
        print(f"\nAPI error (HTTP {e.status_code}): {e.message}")
        sys.exit(1)
    except AzureDevopsError as e:
        print(f"\nError: {e}")
        sys.exit(1)

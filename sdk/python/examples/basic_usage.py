#!/usr/bin/env python3
"""
Basic azdo usage example.

Demonstrates the parts of the library that work without network access.
Run with: python examples/basic_usage.py
"""

from azdo import AzureDevopsError, ConfigurationError, Repo
from azdo.comments import split_comment
from azdo.identity import UserIdentity
from azdo.repo_name import split_repo_full_name
from azdo.status import git_status_state, status_context_from_src
from azdo.testing import MockVCSClient, create_mock_pull
from azdo.types.models import CommitStatus

print("=== azdo Basic Usage Example ===\n")

# 1. Exception hierarchy
print("1. Testing exception classes...")
try:
    raise ConfigurationError("AZDO_TOKEN environment variable not set")
except AzureDevopsError as e:
    print(f"   Caught AzureDevopsError: {e}")
    print(f"   Code: {e.code}, Message: {e.message}")

print("\n   OK: Exception classes working\n")

# 2. Repository names
print("2. Splitting repository names...")
for full_name in ["org/project/repo", "org/project", "org/project/repo/extra"]:
    print(f"   {full_name!r} -> {split_repo_full_name(full_name)}")
repo = Repo("contoso/platform/infra")
print(f"   Repo owner={repo.owner} project={repo.project} name={repo.name}")

print("\n   OK: Repository names working\n")

# 3. Comment splitting
print("3. Splitting long comments...")
chunks = split_comment("x" * 250, max_size=100, sep_end="\n[end]", sep_start="[cont]\n")
for i, chunk in enumerate(chunks):
    print(f"   chunk {i}: {len(chunk)} chars")
assert all(len(chunk) <= 100 for chunk in chunks)

print("\n   OK: Comment splitting working\n")

# 4. Statuses
print("4. Mapping statuses...")
for state in CommitStatus:
    print(f"   {state.value} -> {git_status_state(state).value}")
context = status_context_from_src("atlantis/plan", "Atlantis Bot")
print(f"   atlantis/plan -> genre={context.genre!r} name={context.name!r}")

print("\n   OK: Statuses working\n")

# 5. User identity
print("5. Learning the user GUID...")
identity = UserIdentity()
print(f"   Initial: {identity!r}")
identity.try_set("6b0f8a6e-0000-0000-0000-000000000000")
identity.try_set("another-guid")
print(f"   Learned: {identity.get()}")

print("\n   OK: User identity working\n")

# 6. Mock client
print("6. Driving the mock client...")
mock = MockVCSClient()
mock.configure_pull_is_approved(response=True)
mock.configure_pull_is_mergeable(response=True)
pull = create_mock_pull()
if mock.pull_is_approved(pull.base_repo, pull) and mock.pull_is_mergeable(pull.base_repo, pull):
    mock.merge_pull(pull)
print(f"   Merged pulls: {mock.merged}")

print("\n   OK: Mock client working\n")

print("=== All examples completed ===")

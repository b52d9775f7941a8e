#!/usr/bin/env python3
"""
GitLit Python SDK - basic workflow example.

Walks through a session against a running GitLit server:
1. Register and log in (the token is cached on disk)
2. Create a repository and list it
3. Browse branches, commits and content
4. Clean up and log out

Run with: GITLIT_URL=localhost:8080 python examples/basic_usage.py
"""

import random
import string

from gitlit import BlobContent, GitLitClient, GitLitError, TreeContent, UnauthorizedError


def generate_random_suffix(length: int = 6) -> str:
    """Generate a random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def main() -> None:
    """Run the example workflow."""
    print("=== GitLit Python SDK Example ===\n")

    username = f"example-{generate_random_suffix()}"
    password = generate_random_suffix(16)

    with GitLitClient.from_env() as client:
        print(f"Server: {client.base_url}\n")

        # 1. Account
        print("1. Registering and logging in...")
        print(f"   {client.auth.register(username, f'{username}@example.com', password)}")
        client.auth.login(username, password)
        print("   Token cached\n")

        # 2. Repository
        print("2. Creating repository...")
        repo = client.repos.create(f"demo-{generate_random_suffix()}", description="SDK example")
        print(f"   Created {repo.user}/{repo.name} ({repo.id})")
        for r in client.repos.list(owner=repo.user):
            print(f"   - {r.name} private={r.is_private}")
        print()

        # 3. Browsing
        print("3. Browsing...")
        for branch in client.branches.list(repo.id).branches:
            marker = "*" if branch.is_head else " "
            print(f"   {marker} {branch.name} {branch.oid[:8]}")

        for commit in client.commits.list(repo.id, limit=5):
            print(f"   {commit.hash[:8]} {commit.subject} <{commit.email}>")

        try:
            content = client.contents.get(repo.id)
        except GitLitError as e:
            print(f"   No content yet: {e}")
        else:
            if isinstance(content, TreeContent):
                for entry in content.entries:
                    print(f"   {entry.mode} {entry.kind} {entry.path}")
            elif isinstance(content, BlobContent):
                print(f"   {len(content.decode())} bytes")
        print()

        # 4. Cleanup
        print("4. Cleaning up...")
        print(f"   Deleted: {client.repos.delete(repo.id).ok}")
        client.auth.logout()
        try:
            client.repos.create("should-fail")
        except UnauthorizedError:
            print("   Logged out, authenticated calls are refused")

    print("\n=== Done ===")


if __name__ == "__main__":
    main()

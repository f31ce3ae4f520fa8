"""Repository full-name parsing."""


def split_repo_full_name(repo_full_name: str) -> tuple[str, str, str]:
    """
    Split a repository full name into its owner, project and repo segments.

    Azure DevOps uses the ``owner/project/repo`` format. A malformed name
    does not raise; it yields empty strings so that a bad configuration
    cannot crash request handling.

    Examples:
        >>> split_repo_full_name("runatlantis/atlantis")
        ('runatlantis', '', 'atlantis')
        >>> split_repo_full_name("azuredevops/project/atlantis")
        ('azuredevops', 'project', 'atlantis')
        >>> split_repo_full_name("gitlab/subgroup/runatlantis/atlantis")
        ('gitlab/subgroup/runatlantis', '', 'atlantis')
        >>> split_repo_full_name("atlantis/")
        ('', '', '')
    """
    first_slash = repo_full_name.find("/")
    last_slash = repo_full_name.rfind("/")
    if last_slash == -1 or last_slash == len(repo_full_name) - 1:
        return "", "", ""
    if first_slash != last_slash and repo_full_name.count("/") == 2:
        return (
            repo_full_name[:first_slash],
            repo_full_name[first_slash + 1:last_slash],
            repo_full_name[last_slash + 1:],
        )
    return repo_full_name[:last_slash], "", repo_full_name[last_slash + 1:]

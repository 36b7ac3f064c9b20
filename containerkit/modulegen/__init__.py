"""Validation of example projects and upkeep of a repository's MkDocs and dependabot files."""
"""pkgrecon — package registry reconnaissance from a landing page and its bundles."""

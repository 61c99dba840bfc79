pytest_plugins = ["pytester", "sitecheck.testing.plugin"]

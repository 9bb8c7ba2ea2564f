
# THIS FILE IS GENERATED FROM ENGTAGGER SETUP.PY
short_version = '0.3.0'
version = '0.3.0'
full_version = '0.3.0'
git_revision = 'Unknown'
release = True
if not release:
    version = full_version
    short_version += ".dev"

# containerkit

Building blocks for tests that run against containers. The package covers the
work around a container engine:

- packing files to copy into a container
- reading image names and Dockerfiles
- running lifecycle hooks
- handling log and exec output
- keeping the documentation navigation and dependency-update configuration of
  a repository of container modules up to date

## What is inside

### Archives — `containerkit.tarutil`

- `is_dir(path)` tells whether a path is a directory. It raises `OSError`
  (for example `FileNotFoundError`) if the path cannot be read.
- `tar_dir(src, file_mode)` packs a whole directory into a gzip-compressed tar
  archive and returns its bytes. Each entry name starts with the directory's
  own name. Every entry gets `file_mode` as its permission bits. Symbolic links
  are skipped.
- `tar_file(content, base_path, file_mode)` packs a single file's bytes under
  the base name of `base_path` and returns the archive's bytes.

```python
from containerkit.tarutil import tar_file

archive = tar_file(b"FROM nginx\n", "build/Docker.file", 0o755)
```

### Docker host — `containerkit.docker_host`

- `extract_docker_host(docker_host=None)` works out the Docker socket path, in
  this order:
  1. If the `TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE` environment variable is
     set, its value is used.
  2. A `unix://` URL gives its path.
  3. Anything else, or nothing, gives `/var/run/docker.sock`.
- `in_a_container(path="/.dockerenv")` reports whether the marker file at
  `path` exists.
- `default_gateway_ip()` runs `ip route` through `sh` and returns the default
  gateway. It raises `RuntimeError` if the command fails or prints nothing.

```python
from containerkit.docker_host import extract_docker_host

extract_docker_host("unix:///this/is/a/sample.sock")  # "/this/is/a/sample.sock"
extract_docker_host(None)                              # "/var/run/docker.sock"
```

### Images and registries — `containerkit.images`

- `extract_images_from_dockerfile(dockerfile, build_args=None)` lists the base
  image of every `FROM` line. It replaces `${NAME}` with any build argument
  that has a value.
- `extract_registry(image, fallback)` returns the registry part of an image
  reference. It returns `fallback` if the leading part is not a URL or
  address, and `""` if the reference cannot be parsed.
- `is_url(value)` is the URL check that `extract_registry` relies on.
- `INDEX_DOCKER_IO` holds the default Docker Hub index address.

```python
from containerkit.images import INDEX_DOCKER_IO, extract_registry

extract_registry("localhost:5000/testcontainers/ryuk:latest", INDEX_DOCKER_IO)
# "localhost:5000"
extract_registry("nginx:latest", INDEX_DOCKER_IO)
# "https://index.docker.io/v1/"
```

### Session — `containerkit.session`

- `session_id()` returns one UUID for the whole process. It is created on
  first use, and creating it is thread-safe.
- `session_id_string()` returns the same UUID as text.
- `default_labels()` returns three labels: the language, the session id and
  the version (`org.testcontainers.lang`, `.sessionId`, `.version`).

### Logs — `containerkit.logs`

- `Log(log_type, content)` is one piece of container output. `log_type` is
  `STDOUT_LOG` or `STDERR_LOG`, and `content` is bytes.
- `LogConsumer` is the abstract interface for anything that receives `Log`
  values through `accept(log)`.
- `Logging` is the abstract interface for `printf(fmt, *args)` style loggers.
  Messages are formatted with `%`.
- `StdLogger(stream=None, prefix="")` writes timestamped lines to `stream`, or
  to standard error by default. The module-level `logger` is a `StdLogger`,
  and `globals_logger()` returns it.
- `log_docker_server_info(info, client_version, logger=None)` logs a short
  summary of the Docker server. `info` is the server's info mapping, or a
  callable that fetches it. If the callable raises, the failure is logged
  instead.

### Exec output — `containerkit.processor`

- `demultiplex(stream)` splits Docker's multiplexed stream into a
  `(stdout, stderr)` pair of bytes.
  - Stdin frames count as stdout.
  - A truncated trailing frame is dropped.
  - A daemon error frame or an unknown stream type raises `StreamError`.
- `multiplexed()` returns a process option. Applied to a `ProcessOptions`, it
  replaces `reader` with a stream of the demultiplexed standard output.

### Lifecycle hooks — `containerkit.lifecycle`

`ContainerLifecycleHooks` holds a list of one-argument callables for each of
these stages:

- `pre_creates`, `post_creates`
- `pre_starts`, `post_starts`
- `pre_stops`, `post_stops`
- `pre_terminates`, `post_terminates`

Pre-create hooks receive the container request. All other hooks receive the
container.

Each of the methods below runs every hook for one stage, in order. The first
exception stops the run and propagates.

- `creating`, `created`
- `starting`, `started`
- `stopping`, `stopped`
- `terminating`, `terminated`

`run_hooks(hooks_list, stage, target)` runs one stage across several hook
sets. `stage` is a `Stage` member or its name, such as `"started"`. An unknown
name raises `ValueError`.

`default_logging_hook(logger)` builds hooks that log every stage:

- The pre-create hook logs the request's `image`.
- The other hooks log the first twelve characters of the container's `id`.

### Repository configuration — `containerkit.modulegen`

- `containerkit.modulegen.example`
  - `Example(name, image="", is_module=False, title_name="", tc_version="")`
    describes one example or module project.
  - It derives names through `lower()`, `title()`, `container_name()`,
    `entrypoint()`, `parent_dir()` (`"modules"` or `"examples"`) and `type()`.
  - `validate()` raises `InvalidExampleError` (a `ValueError`) unless both the
    name and the title are letters and digits starting with a letter.
- `containerkit.modulegen.dependabot` reads and writes `.github/dependabot.yml`
  through `read_dependabot_config` and `write_dependabot_config`, using the
  `DependabotConfig`, `Update` and `Schedule` dataclasses.
  - `new_update(example)` builds a monthly `gomod` entry for a project.
  - `generate_dependabot_updates(root_dir, example)` adds that entry. The
    existing first entry stays first, and the remaining entries other than
    `/` are sorted by directory. It raises `ValueError` if the configuration
    has no updates.
- `containerkit.modulegen.mkdocs` reads and writes `mkdocs.yml`.
  - `MkDocsConfig` wraps the document and provides these methods:
    - `site_name()`
    - `latest_version()`
    - `nav_entries(is_module)`, which raises `KeyError` if the section is
      missing
    - `replace_nav_entries(is_module, entries)`
  - `generate_mkdocs(root_dir, example)` adds the project's page to the
    Examples or Modules navigation. The index page stays first and the other
    pages are sorted.
  - `get_root_dir()` returns the parent of the current working directory.

```python
from containerkit.modulegen.example import Example
from containerkit.modulegen.mkdocs import generate_mkdocs

generate_mkdocs("/path/to/repo", Example(name="foodb", title_name="FooDB", is_module=True))
```

## What it does not do

- It does not connect to a container engine. It does not create, start, stop
  or remove containers or networks.
- Lifecycle hooks run only when your own code calls them.
- Log consumers receive only the `Log` values your own code passes to them.
- `containerkit.modulegen` has no command-line entry point and renders no
  project files from templates. It only validates project names and updates
  `mkdocs.yml` and `.github/dependabot.yml`.

## Requirements

Python 3.10 or later. The only dependency is PyYAML. Install the `test` extra
to run the test suite with pytest.
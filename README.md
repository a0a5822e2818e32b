# todoapp

A small todo service, plus the helpers a client needs to use it.

The package has two parts:

* `todoapp.server` is a Flask application. It stores users and todos in
  SQLite and serves them over a JSON API.
* `todoapp.client` holds plain-Python client helpers. They talk to the API,
  keep the signed-in user in a key/value store, validate form input, filter
  the todo list and resolve page routes.

The data types shared by both parts live in `todoapp.models`: `Todo`,
`User`, `Priority`, `AuthState`/`AuthStatus`, `TodoForm`, `LoginForm` and
`Credentials`.

## Installing

```
pip install .
```

To get the test dependencies as well, install the `test` extra:

```
pip install ".[test]"
```

## Running the server

```
DATABASE_URL=sqlite:todos.db todoapp-server
```

The server takes these options:

* `--host`: the address to listen on. The default is `127.0.0.1`.
* `--port`: the port to listen on. The default is `3000`.
* `--database-url`: the database to use.

If `--database-url` is not given, the server reads `DATABASE_URL` from the
environment. It loads `server/.env` first if that file exists. If no URL
can be found, start-up fails with "DATABASE_URL must be set".

The URL may take any of these forms:

* `sqlite:path`
* `sqlite://path`
* a plain file path

An empty path means an in-memory database. On connecting, the server creates
the `users` and `todos` tables if they are missing.

### API

| Method | Path                  | Result                                         |
|--------|-----------------------|------------------------------------------------|
| POST   | `/api/auth/register`  | Creates a user; 201 with `{"token": ...}`      |
| POST   | `/api/auth/login`     | Checks username and password; 200 with a token |
| POST   | `/api/auth/logout`    | Always 200                                     |
| GET    | `/api/todos`          | All todos                                      |
| POST   | `/api/todos`          | Creates a todo; 201 with the new todo          |
| GET    | `/api/todos/<id>`     | One todo                                       |
| PUT    | `/api/todos/<id>`     | Updates the fields given; returns the todo     |
| DELETE | `/api/todos/<id>`     | Deletes a todo; 204                            |

Creating a todo takes these fields:

* `title` (string)
* `priority`: `"Low"`, `"Medium"` or `"High"`
* `description`: an optional string

An update may carry any of `title`, `description`, `completed` and
`priority`. Fields that are missing or `null` keep their stored values.

Errors come back as plain-text bodies:

* 400 for a body that is not JSON, or an id that is not a UUID
* 422 for a missing field, a field of the wrong type, or an unknown priority
* 401 `Invalid Credentials` for a wrong password
* 404 `User Not Found` for an unknown username
* 404 `Not Found` for an unknown todo
* 500 `Database Error` for a storage failure, including registering a
  username that is already taken

Every response carries permissive CORS headers.

### Embedding

To run the API inside your own process, use two functions:

* `todoapp.server.db.init_db(database_url=None)` or `connect(database_url)`
  opens the database and prepares its schema.
* `todoapp.server.app.create_app(db)` builds the Flask application around
  that connection. You can serve the application yourself or drive it with
  Flask's test client.

The handlers are plain functions that raise `todoapp.server.errors.AppError`
subclasses. They live in `todoapp.server.auth` (`register`, `login`,
`logout`) and `todoapp.server.todos` (`all_todos`, `get_todo`,
`create_todo`, `update_todo`, `delete_todo`). Their payload types are in
`todoapp.server.records`.

## Client helpers

```python
from todoapp.client.utils import LocalStorage, validate_email
from todoapp.client.auth_context import AuthContext
from todoapp.client.routes import match_route

validate_email("someone@example.com")    # True
match_route("/todos").kind               # RouteKind.TODO_LIST

auth = AuthContext(LocalStorage("state.json"))
auth.is_authenticated()
```

### `todoapp.client.utils`

* `LocalStorage(path=None)` is a JSON key/value store with `get`, `set` and
  `delete`. It is kept in memory. If a path is given, it is also saved to
  that file.
* `save_user`, `load_user` and `clear_user` keep the signed-in user in
  storage. `save_todos` and `clear_todos` do the same for cached todos.
* `load_todos(api_url)` fetches `<api_url>/todos`.
* `login_user(storage, creds, api_url)` posts the credentials to
  `<api_url>/login` and stores the user it gets back. It raises
  `requests.HTTPError` if the response status is not a success.
* `authenticate_user(storage, username, password)` is an offline check. It
  accepts a username of at least 3 bytes and a password of at least 6 bytes,
  then stores the user. Otherwise it raises `ValueError`.
* `validate_todo_title` raises `ValueError` for a blank title, or for a
  title longer than 100 bytes in UTF-8.
* `validate_email` checks only that the address contains both `@` and `.`.

### `todoapp.client.auth_context`

`AuthContext` tracks who is signed in and keeps its storage in step:

* `login` and `logout` change the signed-in user.
* `is_authenticated` and `current_user` report who that is.
* `resolve(guest_if_absent)` settles an unknown state from storage.
* `greeting()` returns `"Welcome, <username>"` when someone is signed in.

### `todoapp.client.todo_list`

* `filter_todos` selects todos by `FilterState`: `ALL`, `ACTIVE` or
  `COMPLETED`.
* `parse_priority` maps a form value to a priority. Unknown values map to
  medium.
* `priority_color` gives the CSS class used for a priority.
* `validate_form` checks a form before it is submitted.
* `form_payload` and `form_from_todo` convert between todos and forms.
* `ViewState` describes what the page is showing: the list, the add form,
  or the edit form for one todo.
* `TodoApi` fetches, adds, updates, deletes and toggles todos on the server.

### `todoapp.client.routes`

`match_route` maps a path to a `Route`. Any unknown path becomes a
`PAGE_NOT_FOUND` route that keeps the path's segments. `Route.path()` turns
a route back into its path. `not_found_message` builds the line that names
the missing route.

## What this package does not do

* There is no graphical or browser front end. The client modules hold the
  logic and the HTTP calls only; nothing in them draws pages or handles
  clicks.
* Authentication is minimal:
  * Passwords are stored as given, with no hashing.
  * Register and login return the fixed token `dummy-token`.
  * Logout does nothing.
  * Every todo belongs to one built-in user id.

  Do not expose the server to untrusted networks.

## Tests

```
pytest
```
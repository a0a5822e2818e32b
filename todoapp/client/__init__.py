"""Client-side helpers: storage, API calls, authentication state, todo list logic and routes."""
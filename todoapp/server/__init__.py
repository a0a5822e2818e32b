"""The Flask API server, its request handlers, payload records, errors and SQLite storage."""
from impostor import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Use SocketIO server to enable websockets in dev
    socketio.run(
        app,
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.config['LOG_LEVEL'] == 'DEBUG',
        allow_unsafe_werkzeug=True,
    )

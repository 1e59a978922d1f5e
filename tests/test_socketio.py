from datetime import datetime, timedelta


def events(client, namespace, name):
    return [pkt['args'][0] if pkt['args'] else None
            for pkt in client.get_received(namespace) if pkt['name'] == name]


def connect(socket_app, namespace):
    app, socketio, _ = socket_app
    return socketio.test_client(app, namespace=namespace, flask_test_client=app.test_client())


def test_create_and_join_room(socket_app):
    screen = connect(socket_app, '/colors')
    ack = screen.emit('createRoom', namespace='/colors', callback=True)
    assert ack['success'] is True
    code = ack['roomCode']
    assert len(code) == 4

    player = connect(socket_app, '/colors')
    ack = player.emit('joinRoom', {'roomCode': code.lower(), 'playerName': 'Ann'},
                      namespace='/colors', callback=True)
    assert ack == {'success': True, 'isVIP': True}

    rosters = events(screen, '/colors', 'playersUpdate')
    assert rosters[-1][0]['name'] == 'Ann'
    assert rosters[-1][0]['isVIP'] is True
    assert events(player, '/colors', 'playersUpdate')


def test_join_unknown_room(socket_app):
    player = connect(socket_app, '/tavern')
    ack = player.emit('joinRoom', {'roomCode': 'ZZZZ', 'playerName': 'Ann'},
                      namespace='/tavern', callback=True)
    assert ack == {'success': False, 'message': 'Room not found'}


def test_join_with_blank_name_is_rejected(socket_app):
    screen = connect(socket_app, '/bidding')
    code = screen.emit('createRoom', namespace='/bidding', callback=True)['roomCode']

    player = connect(socket_app, '/bidding')
    ack = player.emit('joinRoom', {'roomCode': code, 'playerName': '   '},
                      namespace='/bidding', callback=True)
    assert ack['success'] is False
    assert socket_app[2]['/bidding'].registry.get(code).player_count == 0


def test_disconnect_completes_colors_round(socket_app):
    screen = connect(socket_app, '/colors')
    code = screen.emit('createRoom', namespace='/colors', callback=True)['roomCode']

    ann = connect(socket_app, '/colors')
    ben = connect(socket_app, '/colors')
    ann.emit('joinRoom', {'roomCode': code, 'playerName': 'Ann'}, namespace='/colors', callback=True)
    ben.emit('joinRoom', {'roomCode': code, 'playerName': 'Ben'}, namespace='/colors', callback=True)
    ann.get_received('/colors')

    screen.emit('startRound', {'roomCode': code}, namespace='/colors')
    round_data = events(ann, '/colors', 'newRound')[-1]
    answer = next(option for option in round_data['options']
                  if option[round_data['prompt']] == round_data['targetColor'])

    ack = ann.emit('submitAnswer', {'roomCode': code, 'selection': answer},
                   namespace='/colors', callback=True)
    assert ack['success'] is True
    assert ack['correct'] is True
    assert events(ann, '/colors', 'roundResults') == []

    ben.disconnect(namespace='/colors')

    results = events(ann, '/colors', 'roundResults')
    assert len(results) == 1
    assert results[0]['results'] == [{'name': 'Ann', 'correct': True}]
    assert results[0]['players'] == [{'id': results[0]['players'][0]['id'], 'name': 'Ann',
                                      'isVIP': True, 'score': 1}]


def test_non_host_cannot_start_round(socket_app):
    screen = connect(socket_app, '/colors')
    code = screen.emit('createRoom', namespace='/colors', callback=True)['roomCode']
    ann = connect(socket_app, '/colors')
    ben = connect(socket_app, '/colors')
    ann.emit('joinRoom', {'roomCode': code, 'playerName': 'Ann'}, namespace='/colors', callback=True)
    ben.emit('joinRoom', {'roomCode': code, 'playerName': 'Ben'}, namespace='/colors', callback=True)
    ben.get_received('/colors')

    ben.emit('startRound', {'roomCode': code}, namespace='/colors')
    assert events(ben, '/colors', 'newRound') == []

    ann.emit('startRound', {'roomCode': code}, namespace='/colors')
    assert len(events(ben, '/colors', 'newRound')) == 1


def test_bid_ack_reports_rejection(socket_app):
    screen = connect(socket_app, '/bidding')
    code = screen.emit('createRoom', namespace='/bidding', callback=True)['roomCode']
    ann = connect(socket_app, '/bidding')
    ann.emit('joinRoom', {'roomCode': code, 'playerName': 'Ann'}, namespace='/bidding', callback=True)

    ack = ann.emit('submitBid', {'roomCode': code, 'amount': 'lots'}, namespace='/bidding', callback=True)
    assert ack == {'success': False, 'message': 'Bid must be a whole number'}


def test_health_lists_games(socket_app):
    app, _, _ = socket_app
    res = app.test_client().get('/api/health')
    assert res.status_code == 200
    assert res.get_json()['games'] == ['arena', 'colors', 'questions', 'tavern']


def test_active_rooms_groups_by_game(socket_app):
    app, _, managers = socket_app
    managers['/questions'].create_room('screen')

    body = app.test_client().get('/api/rooms/active').get_json()
    assert len(body['rooms']['questions']) == 1
    assert body['rooms']['colors'] == []


def test_cleanup_reaps_stale_empty_rooms(socket_app):
    app, _, managers = socket_app
    manager = managers['/colors']
    _, _, stale = manager.create_room('screen')
    _, _, fresh = manager.create_room('screen')
    manager.registry.get(stale).created_at = datetime.utcnow() - timedelta(hours=1)

    res = app.test_client().post('/api/rooms/cleanup')
    assert res.get_json()['cleaned'] == 1
    assert manager.registry.get(stale) is None
    assert manager.registry.get(fresh) is not None


def test_unknown_route_is_json_404(socket_app):
    app, _, _ = socket_app
    res = app.test_client().get('/api/nope')
    assert res.status_code == 404
    assert res.get_json() == {'error': 'Not found'}


def test_rejected_rejoin_keeps_player_subscribed(socket_app):
    screen = connect(socket_app, '/colors')
    code = screen.emit('createRoom', namespace='/colors', callback=True)['roomCode']
    ann = connect(socket_app, '/colors')
    ann.emit('joinRoom', {'roomCode': code, 'playerName': 'Ann'}, namespace='/colors', callback=True)

    ack = ann.emit('joinRoom', {'roomCode': code, 'playerName': ''}, namespace='/colors', callback=True)
    assert ack == {'success': False, 'message': 'Name cannot be empty'}
    ann.get_received('/colors')

    ben = connect(socket_app, '/colors')
    ben.emit('joinRoom', {'roomCode': code, 'playerName': 'Ben'}, namespace='/colors', callback=True)

    rosters = events(ann, '/colors', 'playersUpdate')
    assert [p['name'] for p in rosters[-1]] == ['Ann', 'Ben']

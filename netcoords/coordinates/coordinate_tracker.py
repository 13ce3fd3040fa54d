import time

from netcoords.models import NetworkCoordinate, VivaldiConfig

from .coordinate_node import DEFAULT_MAX_ITERATIONS, CoordinateNode

DEFAULT_PEER_TTL_SECONDS = 300.0


class CoordinateTracker:
    """
    Tracks the local node's coordinate and the last coordinate learned
    from each peer.

    Provides RTT estimation against known peers without measuring, and
    expires peers that have not been heard from within a TTL.
    """

    def __init__(
        self,
        node: CoordinateNode | None = None,
        config: VivaldiConfig | None = None,
        peer_ttl_seconds: float = DEFAULT_PEER_TTL_SECONDS,
    ) -> None:
        self._node = node if node is not None else CoordinateNode(config=config)
        self._peer_ttl_seconds = peer_ttl_seconds
        self._peers: dict[str, NetworkCoordinate] = {}
        self._peer_last_seen: dict[str, float] = {}

    @property
    def node(self) -> CoordinateNode:
        return self._node

    def get_coordinate(self) -> NetworkCoordinate:
        """Get the local node's coordinate."""
        return self._node.coordinate

    def update_peer_coordinate(
        self,
        peer_id: str,
        peer_coordinate: NetworkCoordinate,
        rtt_ms: float,
    ) -> bool:
        """
        Update the local coordinate from an RTT measurement to a peer and
        remember the peer's coordinate for later estimates.

        Args:
            peer_id: Identifier of the peer
            peer_coordinate: Peer's reported coordinate
            rtt_ms: Measured round-trip time in milliseconds

        Returns:
            False if the sample was ignored (non-positive RTT) or rolled
            back by the node, True otherwise
        """
        if not rtt_ms > 0.0:
            return False

        self._peers[peer_id] = peer_coordinate.copy()
        self._peer_last_seen[peer_id] = time.monotonic()

        return self._node.update(rtt_ms / 1000.0, self._peers[peer_id])

    def update_all_peers(
        self,
        rtts_ms: dict[str, float],
        threshold_ms: float,
        max_passes: int = DEFAULT_MAX_ITERATIONS,
    ) -> bool:
        """
        Fit the local coordinate to a set of RTTs to already known peers,
        interleaving the peers on every pass. Unknown peers and
        non-positive RTTs are skipped.

        Raises InvalidCoordinateError if the coordinate becomes non-finite.
        """
        samples = [
            (rtt_ms / 1000.0, self._peers[peer_id])
            for peer_id, rtt_ms in rtts_ms.items()
            if peer_id in self._peers and rtt_ms > 0.0
        ]

        return self._node.update_until_all(
            samples,
            threshold_ms / 1000.0,
            max_passes=max_passes,
        )

    def estimate_rtt_ms(self, peer_id: str) -> float | None:
        """Estimate RTT to a known peer, or None if the peer is unknown."""
        peer_coordinate = self._peers.get(peer_id)
        if peer_coordinate is None:
            return None

        return self._node.estimate_rtt_ms(peer_coordinate)

    def get_peer_coordinate(self, peer_id: str) -> NetworkCoordinate | None:
        return self._peers.get(peer_id)

    def remove_peer(self, peer_id: str) -> bool:
        self._peer_last_seen.pop(peer_id, None)
        return self._peers.pop(peer_id, None) is not None

    def apply_gravity(self) -> None:
        self._node.update_gravity()

    def cleanup_stale_peers(self, max_age_seconds: float | None = None) -> int:
        """
        Remove peers not updated within ``max_age_seconds`` (defaults to
        the tracker's TTL).

        Returns:
            Number of peers removed
        """
        if max_age_seconds is None:
            max_age_seconds = self._peer_ttl_seconds

        now = time.monotonic()
        stale_peers = [
            peer_id
            for peer_id, last_seen in self._peer_last_seen.items()
            if now - last_seen > max_age_seconds
        ]

        for peer_id in stale_peers:
            self._peers.pop(peer_id, None)
            self._peer_last_seen.pop(peer_id, None)

        return len(stale_peers)

    def get_peer_count(self) -> int:
        return len(self._peers)

    def get_all_peer_ids(self) -> list[str]:
        return list(self._peers.keys())

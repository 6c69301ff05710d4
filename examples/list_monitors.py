import asyncio

from ackack import AckAckClient, APIConfig, configure_structlog, is_not_found_error

configure_structlog()


async def main():
    # Reads ACKACK_API_KEY and, optionally, ACKACK_ENDPOINT
    async with AckAckClient(config=APIConfig.from_env(version="example")) as client:
        for monitor in await client.list_monitors():
            uptime = await client.get_monitor_uptime(monitor.id, hours=24)
            print(f"{monitor.name} ({monitor.type}): {uptime.uptime:.2f}% over 24h")

        try:
            await client.get_monitor("does-not-exist")
        except Exception as e:
            if not is_not_found_error(e):
                raise
            print("Monitor is gone")


if __name__ == "__main__":
    asyncio.run(main())

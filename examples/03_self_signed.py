"""
Self-hosted servers - Accept self-signed certificates and make raw calls
"""
import asyncio
from appclient import Client


async def main():
    async with Client("https://localhost/v1", self_signed=True) as client:
        client.set_project("console").set_locale("en")
        
        health = await client.call("GET", "/health")
        print(health)
        
        data = await client.storage.get_file_download("photos", "logo")
        print(f"Downloaded {len(data)} bytes")


if __name__ == "__main__":
    asyncio.run(main())

"""
Basic usage - Configure the client and list files
"""
import asyncio
from appclient import Client


async def main():
    async with Client("https://cloud.example.com/v1") as client:
        client.set_project("my-project").set_key("my-secret-key")
        
        files = await client.storage.list_files("photos", limit=10)
        print(f"{files.total} files in bucket")
        for file in files:
            print(f"  {file.id}  {file.name}  {file.size_original} bytes")


if __name__ == "__main__":
    asyncio.run(main())
